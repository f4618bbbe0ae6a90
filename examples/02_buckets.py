"""
Create buckets and change their type
"""
import asyncio
import os

from blazepy import B2Client, BucketType


async def main():
    async with B2Client(os.environ["B2_APPLICATION_KEY_ID"], os.environ["B2_APPLICATION_KEY"]) as b2:
        await b2.authorize()

        # Bucket names are global across all B2 accounts
        bucket = await b2.create_bucket("my-unique-bucket-name", BucketType.ALL_PRIVATE)
        print(f"Created: {bucket}")

        # Look a bucket up by exact name
        bucket = await b2.get_bucket("my-unique-bucket-name")
        if bucket is None:
            print("Bucket not found")
            return

        # The stored type is whatever the server reports back
        new_type = await bucket.set_type(BucketType.ALL_PUBLIC)
        print(f"{bucket.name} is now {new_type.value}")


if __name__ == "__main__":
    asyncio.run(main())
