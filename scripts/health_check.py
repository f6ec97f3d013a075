"""Health check script for all environments"""
import asyncio

import httpx

from base_counter.core.config import get_settings


async def check_health():
    settings = get_settings()
    env = settings.ENVIRONMENT.value

    urls = {
        "local": "http://localhost:8001/health",
        "dev": "http://localhost:8000/health",
        "staging": "https://staging-api.base-counter.xyz/health",
        "prod": "https://api.base-counter.xyz/health",
    }

    url = urls.get(env)
    if not url:
        print(f"Unknown environment: {env}")
        return False

    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(url)
            data = response.json()

            print(f"Environment: {env}")
            print(f"Status: {data['status']}")
            print("Services:")
            for service, status in data["services"].items():
                mark = "ok" if status else "FAIL"
                print(f"  [{mark}] {service}: {status}")

            return data["status"] == "healthy"

    except httpx.HTTPError as e:
        print(f"Health check failed: {e}")
        return False


if __name__ == "__main__":
    asyncio.run(check_health())
