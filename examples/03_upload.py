"""
Upload files to a bucket
"""
import asyncio
import os

from blazepy import B2Client


async def main():
    async with B2Client(os.environ["B2_APPLICATION_KEY_ID"], os.environ["B2_APPLICATION_KEY"]) as b2:
        await b2.authorize()
        bucket = await b2.get_bucket("photos")

        # Upload bytes; SHA-1 is computed and content type is auto-detected
        result = await bucket.upload(b"hello world", "greetings/hello.txt")
        print(f"Uploaded: {result.file_name} ({result.file_id})")

        # Explicit content type
        result = await bucket.upload(b"{}", "data/empty.json", content_type="application/json")
        print(f"Uploaded as {result.content_type}")

        # Upload a local file under a different name
        result = await bucket.upload_file("vacation.jpg", remote_name="2024/vacation.jpg")
        print(f"SHA1: {result.content_sha1}")

        # Upload the contents of a URL, named after its last path segment
        result = await bucket.upload_url("https://www.example.com/index.html")
        print(f"Uploaded: {result.file_name}")


if __name__ == "__main__":
    asyncio.run(main())
