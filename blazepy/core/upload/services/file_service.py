"""
File validation and reading services.

Single Responsibility: Each class handles one specific task.
"""
from pathlib import Path
from typing import Tuple, Union
import aiofiles

from ...exceptions import UploadFailedError
from ...logging import get_logger


class FileValidator:
    """
    Validates local paths before upload.
    
    Responsibilities:
    - Check path existence
    - Reject directories
    - Get file size
    """
    
    def validate(self, file_path: Union[str, Path]) -> Tuple[Path, int]:
        """
        Validate a file for upload.
        
        Args:
            file_path: Path to the file
            
        Returns:
            Tuple of (validated Path, file size in bytes)
            
        Raises:
            FileNotFoundError: If the path doesn't exist
            UploadFailedError: If the path is a directory or not a regular file
        """
        path = Path(file_path) if isinstance(file_path, str) else file_path
        
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        
        if path.is_dir():
            raise UploadFailedError(f"Folder upload is not supported: {path}")
        
        if not path.is_file():
            raise UploadFailedError(f"Path is not a regular file: {path}")
        
        return path, path.stat().st_size


class AsyncFileReader:
    """
    Asynchronous whole-file reader.
    
    Uploads hash the complete payload, so files are read fully into memory.
    """
    
    def __init__(self):
        self._logger = get_logger('blazepy.upload.file')
    
    async def read_file(self, file_path: Path) -> bytes:
        """
        Read entire file.
        
        Args:
            file_path: Path to the file
            
        Returns:
            File contents
        """
        async with aiofiles.open(file_path, 'rb') as f:
            data = await f.read()
        self._logger.debug(f"Read {file_path} ({len(data)} bytes)")
        return data
