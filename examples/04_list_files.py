"""
List files page by page or all at once
"""
import asyncio
import os

from blazepy import B2Client


async def main():
    async with B2Client(os.environ["B2_APPLICATION_KEY_ID"], os.environ["B2_APPLICATION_KEY"]) as b2:
        await b2.authorize()
        bucket = await b2.get_bucket("photos")

        # One page at a time
        page = await bucket.list_file_names(max_file_count=100)
        while True:
            for item in page.files:
                print(f"  {item.file_name} ({item.content_length:,} bytes)")
            if page.next_file_name is None:
                break
            page = await bucket.list_file_names(start_file_name=page.next_file_name, max_file_count=100)

        # Top-level folders only
        async for item in bucket.iter_file_names(delimiter="/"):
            if item.is_folder:
                print(f"  [DIR] {item.file_name}")

        # Every stored version, including hidden ones
        versions = await bucket.list_file_versions(prefix="greetings/")
        for item in versions.files:
            print(f"  {item.action:6} {item.file_name} {item.upload_timestamp:%Y-%m-%d}")


if __name__ == "__main__":
    asyncio.run(main())
