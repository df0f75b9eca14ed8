import os

from logging_config import get_logger

logger = get_logger("file_loader")


class LoadError(Exception):
    """The file could not be brought into memory for editing."""


class FileLoader:
    def __init__(self, path: str):
        self.path = path

    def load(self) -> bytes:
        try:
            with open(self.path, "rb") as f:
                data = f.read()
        except IsADirectoryError:
            raise LoadError(f"{self.path} is a directory") from None
        except FileNotFoundError:
            raise LoadError(f"{self.path} does not exist") from None
        except PermissionError:
            raise LoadError(f"permission denied: {self.path}") from None
        except OSError as exc:
            raise LoadError(f"{self.path}: {exc.strerror or exc}") from exc

        # the cursor needs at least one byte to address
        if not data:
            raise LoadError(f"{self.path} is empty")

        logger.info("loaded %s (%d bytes)", os.path.abspath(self.path), len(data))
        return data
