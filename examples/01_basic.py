"""
Basic usage - Authorize and list buckets
"""
import asyncio
import os

from blazepy import B2Client


async def main():
    key_id = os.environ["B2_APPLICATION_KEY_ID"]
    key = os.environ["B2_APPLICATION_KEY"]

    async with B2Client(key_id, key) as b2:
        session = await b2.authorize()
        print(f"Connected! API: {session.api_url}")
        print(f"Recommended part size: {session.recommended_part_size:,} bytes")

        # Calling authorize again reuses the cached token
        await b2.authorize()

        print("\nBuckets:")
        for bucket in await b2.list_buckets():
            print(f"  {bucket}")


if __name__ == "__main__":
    asyncio.run(main())
