"""B2 CLI - Main commands."""
import asyncio
from pathlib import Path
from typing import Optional

import aiohttp
import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="b2",
    help="Backblaze B2 cloud storage CLI",
    add_completion=False
)
console = Console()


KEY_ID_OPTION = typer.Option(
    ..., "--key-id", envvar="B2_APPLICATION_KEY_ID", help="Application key id"
)
KEY_OPTION = typer.Option(
    ..., "--key", envvar="B2_APPLICATION_KEY", help="Application key", hide_input=True
)


def run_async(coro):
    """Run async function."""
    return asyncio.run(coro)


async def _open_bucket(b2, bucket_name: str):
    """Authorize and look up a bucket, exiting if it doesn't exist."""
    await b2.authorize()
    bucket = await b2.get_bucket(bucket_name)
    if bucket is None:
        console.print(f"[red]Bucket not found: {bucket_name}[/red]")
        raise typer.Exit(1)
    return bucket


def _fail(e: Exception):
    console.print(f"[red]Error: {e}[/red]")
    raise typer.Exit(1)


@app.command()
def buckets(
    key_id: str = KEY_ID_OPTION,
    key: str = KEY_OPTION,
):
    """List buckets on the account."""
    from blazepy import B2Client, B2Exception

    async def do_list():
        async with B2Client(key_id, key) as b2:
            try:
                await b2.authorize()
                items = await b2.list_buckets()
            except (B2Exception, aiohttp.ClientError) as e:
                _fail(e)

            table = Table()
            table.add_column("Name")
            table.add_column("Type", style="cyan")
            table.add_column("Id", style="dim")
            for bucket in items:
                table.add_row(bucket.name, bucket.type.value, bucket.id)
            console.print(table)

    run_async(do_list())


@app.command("create-bucket")
def create_bucket(
    name: str = typer.Argument(..., help="Bucket name"),
    public: bool = typer.Option(False, "--public", help="Create an allPublic bucket"),
    key_id: str = KEY_ID_OPTION,
    key: str = KEY_OPTION,
):
    """Create a bucket."""
    from blazepy import B2Client, B2Exception, BucketType

    bucket_type = BucketType.ALL_PUBLIC if public else BucketType.ALL_PRIVATE

    async def do_create():
        async with B2Client(key_id, key) as b2:
            try:
                await b2.authorize()
                bucket = await b2.create_bucket(name, bucket_type)
            except (B2Exception, aiohttp.ClientError) as e:
                _fail(e)
            console.print(f"[green]Created {bucket}[/green]")

    run_async(do_create())


@app.command("set-type")
def set_type(
    bucket_name: str = typer.Argument(..., help="Bucket name"),
    bucket_type: str = typer.Argument(..., help="allPublic, allPrivate, share or snapshot"),
    key_id: str = KEY_ID_OPTION,
    key: str = KEY_OPTION,
):
    """Change a bucket's type."""
    from blazepy import B2Client, B2Exception, BucketType, MalformedRequestError

    try:
        new_type = BucketType.require(bucket_type)
    except MalformedRequestError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(2)

    async def do_set():
        async with B2Client(key_id, key) as b2:
            try:
                bucket = await _open_bucket(b2, bucket_name)
                result = await bucket.set_type(new_type)
            except (B2Exception, aiohttp.ClientError) as e:
                _fail(e)
            console.print(f"[green]{bucket.name} is now {result.value}[/green]")

    run_async(do_set())


@app.command()
def ls(
    bucket_name: str = typer.Argument(..., help="Bucket name"),
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Name prefix"),
    delimiter: Optional[str] = typer.Option(None, "--delimiter", help="Folder delimiter, e.g. /"),
    long: bool = typer.Option(False, "-l", "--long", help="Long format with details"),
    key_id: str = KEY_ID_OPTION,
    key: str = KEY_OPTION,
):
    """List file names in a bucket."""
    from blazepy import B2Client, B2Exception

    async def do_ls():
        async with B2Client(key_id, key) as b2:
            try:
                bucket = await _open_bucket(b2, bucket_name)
                files = [f async for f in bucket.iter_file_names(prefix=prefix, delimiter=delimiter)]
            except (B2Exception, aiohttp.ClientError) as e:
                _fail(e)

            if not long:
                for item in files:
                    console.print(item.file_name)
                return

            table = Table()
            table.add_column("Action", style="cyan")
            table.add_column("Size", justify="right")
            table.add_column("Uploaded")
            table.add_column("Name")
            table.add_column("Id", style="dim")
            for item in files:
                size_str = "-" if item.is_folder else f"{item.content_length:,}"
                uploaded = "-" if item.is_folder else item.upload_timestamp.strftime("%Y-%m-%d %H:%M:%S")
                table.add_row(item.action, size_str, uploaded, item.file_name, item.file_id or "")
            console.print(table)

    run_async(do_ls())


@app.command()
def upload(
    bucket_name: str = typer.Argument(..., help="Bucket name"),
    source: str = typer.Argument(..., help="Local file path or URL"),
    remote_name: Optional[str] = typer.Option(None, "--name", "-n", help="Destination file name"),
    content_type: Optional[str] = typer.Option(None, "--content-type", help="MIME type"),
    key_id: str = KEY_ID_OPTION,
    key: str = KEY_OPTION,
):
    """Upload a local file or URL to a bucket."""
    from blazepy import B2Client, B2Exception

    async def do_upload():
        async with B2Client(key_id, key) as b2:
            try:
                bucket = await _open_bucket(b2, bucket_name)
                with console.status(f"Uploading {source}..."):
                    result = await bucket.upload_url(source, remote_name, content_type)
            except (B2Exception, aiohttp.ClientError, FileNotFoundError) as e:
                _fail(e)
            console.print(f"[green]Uploaded {result.file_name}[/green]")
            console.print(f"File ID: {result.file_id}")
            console.print(f"SHA1: {result.content_sha1}")

    run_async(do_upload())


@app.command()
def download(
    file_id: str = typer.Argument(..., help="File id"),
    output: Path = typer.Option(..., "--output", "-o", help="Destination path"),
    key_id: str = KEY_ID_OPTION,
    key: str = KEY_OPTION,
):
    """Download a file by id."""
    from blazepy import B2Client, B2Exception

    async def do_download():
        async with B2Client(key_id, key) as b2:
            try:
                await b2.authorize()
                data = await b2.download_file(file_id)
            except (B2Exception, aiohttp.ClientError) as e:
                _fail(e)
            output.write_bytes(data)
            console.print(f"[green]Saved {len(data):,} bytes to {output}[/green]")

    run_async(do_download())


@app.command()
def hide(
    bucket_name: str = typer.Argument(..., help="Bucket name"),
    file_name: str = typer.Argument(..., help="File name to hide"),
    key_id: str = KEY_ID_OPTION,
    key: str = KEY_OPTION,
):
    """Hide a file so listings by name skip it."""
    from blazepy import B2Client, B2Exception

    async def do_hide():
        async with B2Client(key_id, key) as b2:
            try:
                bucket = await _open_bucket(b2, bucket_name)
                result = await bucket.hide_file(file_name)
            except (B2Exception, aiohttp.ClientError) as e:
                _fail(e)
            console.print(f"[green]Hidden {result.file_name} ({result.file_id})[/green]")

    run_async(do_hide())


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
