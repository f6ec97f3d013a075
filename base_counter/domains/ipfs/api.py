from typing import Optional

from fastapi import APIRouter, File, HTTPException, UploadFile

from base_counter.domains.ipfs.service import ipfs_uploader
from base_counter.shared.errors import CounterError
from base_counter.shared.utils.logger import get_logger

logger = get_logger(__name__)


router = APIRouter()


@router.post("/upload-image")
async def upload_image(file: Optional[UploadFile] = File(default=None)):
    """Pin a share image to IPFS"""
    if file is None:
        raise HTTPException(status_code=400, detail="No file provided")

    content = await file.read()
    try:
        result = await ipfs_uploader.upload_image(
            content, file.filename, file.content_type or "image/png"
        )
    except CounterError as e:
        logger.error(f"Error uploading to IPFS: {e.message}")
        raise HTTPException(status_code=500, detail=e.message)
    return {"success": True, "cid": result.cid, "ipfsUrl": result.ipfs_url}
