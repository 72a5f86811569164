"""
File pick boundary.

The file-selection dialog itself is external; what reaches us is a list of
picked sources. Only the first one is consumed. Reading happens inside an
access grant that is always released once the bytes are read, whether the
read succeeded or not.

Read failures leave the file model unset. They are logged, never raised.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Optional, Protocol, Sequence, runtime_checkable

from schema_forms.errors import ResourceAccessError
from schema_forms.runtime.widget_models import FileModel

logger = logging.getLogger(__name__)


@runtime_checkable
class FileSource(Protocol):
    """A picked file whose bytes can be read under an access grant."""

    @property
    def name(self) -> str:
        ...

    def begin_access(self) -> bool:
        """Acquire the access grant; False if access is refused."""
        ...

    def end_access(self) -> None:
        """Release the access grant."""
        ...

    def read_bytes(self) -> bytes:
        ...


class LocalFileSource:
    """File on the local filesystem."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._open = False

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def accessing(self) -> bool:
        return self._open

    def begin_access(self) -> bool:
        if not self.path.is_file():
            logger.warning(f"Cannot access picked file: {self.path}")
            return False
        self._open = True
        return True

    def end_access(self) -> None:
        self._open = False

    def read_bytes(self) -> bytes:
        if not self._open:
            raise ResourceAccessError(f"Read outside access grant: {self.path}")
        return self.path.read_bytes()


class UploadedFileSource:
    """File picked through Streamlit's ``st.file_uploader``."""

    def __init__(self, uploaded_file: Any):
        self._uploaded = uploaded_file
        self._open = False

    @property
    def name(self) -> str:
        return self._uploaded.name

    def begin_access(self) -> bool:
        self._open = True
        return True

    def end_access(self) -> None:
        self._open = False

    def read_bytes(self) -> bytes:
        if not self._open:
            raise ResourceAccessError(f"Read outside access grant: {self.name}")
        return self._uploaded.getvalue()


@contextmanager
def scoped_access(source: FileSource) -> Iterator[FileSource]:
    """
    Hold the access grant of ``source`` for the duration of the block.

    Raises:
        ResourceAccessError: If the grant cannot be acquired
    """
    if not source.begin_access():
        raise ResourceAccessError(f"Access to '{source.name}' was refused")
    try:
        yield source
    finally:
        source.end_access()
        logger.debug(f"Released access grant for {source.name}")


def load_selection(sources: Sequence[FileSource], model: FileModel) -> bool:
    """
    Read the first picked file into ``model``.

    Args:
        sources: Picked files; everything after the first is ignored
        model: File model to populate

    Returns:
        True if the model was set, False otherwise
    """
    if not sources:
        return False

    source = sources[0]
    try:
        with scoped_access(source):
            data = source.read_bytes()
    except (OSError, ResourceAccessError) as e:
        logger.error(f"Error reading picked file '{source.name}': {e}")
        return False

    model.select(data, source.name)
    logger.info(f"File selected: {source.name}")
    return True


class FilePickDispatcher:
    """Runs file reads off the UI thread."""

    def __init__(self, max_workers: int = 1):
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="file-pick")

    def dispatch(self, sources: Sequence[FileSource], model: FileModel) -> "Future[bool]":
        return self._executor.submit(load_selection, list(sources), model)

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "FilePickDispatcher":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()


def picked_sources(uploaded: Optional[Any]) -> list:
    """Wrap the result of ``st.file_uploader`` into file sources."""
    if uploaded is None:
        return []
    if not isinstance(uploaded, (list, tuple)):
        uploaded = [uploaded]
    return [UploadedFileSource(item) for item in uploaded]
