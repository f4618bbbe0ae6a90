"""
Download, hide and delete files
"""
import asyncio
import os
from pathlib import Path

from blazepy import B2Client, B2APIError


async def main():
    async with B2Client(os.environ["B2_APPLICATION_KEY_ID"], os.environ["B2_APPLICATION_KEY"]) as b2:
        await b2.authorize()
        bucket = await b2.get_bucket("photos")

        result = await bucket.upload(b"temporary", "tmp/note.txt")

        # Download by id or by name
        data = await b2.download_file(result.file_id)
        Path("note.txt").write_bytes(data)
        data = await bucket.download_file_by_name("tmp/note.txt")
        print(f"Downloaded {len(data)} bytes")

        # Metadata of one version
        info = await b2.get_file_info(result.file_id)
        print(f"{info.file_name}: {info.content_type}, uploaded {info.upload_timestamp}")

        # Hiding keeps old versions but removes the name from listings
        hidden = await bucket.hide_file("tmp/note.txt")
        print(f"Hidden: {hidden.file_name}")

        # Delete the uploaded version for good
        deleted = await b2.delete_file_version(result.file_name, result.file_id)
        print(f"Deleted: {deleted.file_id}")

        try:
            await b2.download_file(result.file_id)
        except B2APIError as e:
            print(f"Expected failure: {e.status} {e.code}")
            if e.is_auth_expired:
                await b2.authorize(force=True)


if __name__ == "__main__":
    asyncio.run(main())
