from base_counter.core.config import settings
from base_counter.domains.manifest.api import build_manifest


def test_manifest_uses_app_url(monkeypatch):
    monkeypatch.setattr(settings, "APP_URL", "https://counter.example/")
    frame = build_manifest()["frame"]
    assert frame["homeUrl"] == "https://counter.example"
    assert frame["iconUrl"] == "https://counter.example/images/icon.jpg"
    assert frame["version"] == "1"


async def test_well_known_route(client, monkeypatch):
    monkeypatch.setattr(settings, "ACCOUNT_ASSOCIATION_HEADER", "hdr")
    r = await client.get("/.well-known/farcaster.json")
    assert r.status_code == 200
    body = r.json()
    assert body["accountAssociation"]["header"] == "hdr"
    assert body["frame"]["name"] == settings.APP_NAME
    assert body["frame"]["buttonTitle"] == settings.APP_BUTTON_TITLE
