import json

import httpx
import pytest

from base_counter.domains.ipfs.service import IpfsUploader, PinResult, ipfs_uploader
from base_counter.shared.errors import ConfigurationError, UpstreamServiceError

CREDENTIALS = [("key-1", "secret-1"), ("key-2", "secret-2")]


async def test_upload_fails_over_to_next_credentials():
    seen = []

    def handler(request):
        seen.append(request.headers["pinata_api_key"])
        if request.headers["pinata_api_key"] == "key-1":
            return httpx.Response(401, json={"error": "Invalid API key"})
        assert request.url.path == "/pinning/pinFileToIPFS"
        return httpx.Response(200, json={"IpfsHash": "QmShareImage"})

    uploader = IpfsUploader(
        credentials=CREDENTIALS, gateway="gw.example", transport=httpx.MockTransport(handler)
    )
    result = await uploader.upload_image(b"\x89PNG", "share.png")
    assert result == PinResult(cid="QmShareImage", ipfs_url="https://gw.example/ipfs/QmShareImage")
    assert seen == ["key-1", "key-2"]


async def test_upload_sends_pinata_metadata():
    captured = {}

    def handler(request):
        captured["body"] = request.content
        return httpx.Response(200, json={"IpfsHash": "QmA"})

    uploader = IpfsUploader(credentials=CREDENTIALS[:1], transport=httpx.MockTransport(handler))
    await uploader.upload_image(b"data", "card.png")
    assert json.dumps({"name": "card.png"}).encode() in captured["body"]


async def test_upload_all_credentials_fail():
    uploader = IpfsUploader(
        credentials=CREDENTIALS, transport=httpx.MockTransport(lambda r: httpx.Response(500))
    )
    with pytest.raises(UpstreamServiceError):
        await uploader.upload_image(b"data")


async def test_upload_missing_hash_is_failure():
    uploader = IpfsUploader(
        credentials=CREDENTIALS[:1], transport=httpx.MockTransport(lambda r: httpx.Response(200, json={}))
    )
    with pytest.raises(UpstreamServiceError):
        await uploader.upload_image(b"data")


async def test_upload_without_credentials():
    with pytest.raises(ConfigurationError):
        await IpfsUploader(credentials=[]).upload_image(b"data")


async def test_upload_endpoint_without_file(client):
    r = await client.post("/api/ipfs/upload-image", data={"note": "no file"})
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "No file provided"}


async def test_upload_endpoint(client, monkeypatch):
    async def fake_upload(content, filename=None, content_type="image/png"):
        assert content == b"img-bytes"
        return PinResult(cid="QmX", ipfs_url="https://gateway.pinata.cloud/ipfs/QmX")

    monkeypatch.setattr(ipfs_uploader, "upload_image", fake_upload)
    r = await client.post(
        "/api/ipfs/upload-image", files={"file": ("share.png", b"img-bytes", "image/png")}
    )
    assert r.status_code == 200
    assert r.json() == {"success": True, "cid": "QmX", "ipfsUrl": "https://gateway.pinata.cloud/ipfs/QmX"}


async def test_upload_endpoint_reports_failure(client, monkeypatch):
    async def failing_upload(content, filename=None, content_type="image/png"):
        raise UpstreamServiceError("All Pinata API keys failed")

    monkeypatch.setattr(ipfs_uploader, "upload_image", failing_upload)
    r = await client.post("/api/ipfs/upload-image", files={"file": ("a.png", b"x", "image/png")})
    assert r.status_code == 500
    assert r.json()["error"] == "All Pinata API keys failed"
