import mimetypes
from pathlib import Path

from carbon_verify.intake.exceptions import InvalidFileTypeError, MissingFileError
from carbon_verify.intake.models import IntakePolicy, UploadedFile
from carbon_verify.logging.logger import Log


def load_uploaded_file(path: Path, mime_type: str | None = None) -> UploadedFile:
    """Read a file from disk into an UploadedFile.

    The MIME type is guessed from the extension when not given; unknown
    extensions become ``application/octet-stream`` and will be rejected
    by either intake policy.

    Raises:
        FileNotFoundError: if *path* does not exist.
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    if mime_type is None:
        guessed, _ = mimetypes.guess_type(path.name)
        mime_type = guessed or "application/octet-stream"
    return UploadedFile(name=path.name, mime_type=mime_type, data=path.read_bytes())


class FileIntake:
    """Accepts one file at a time for a single upload flow."""

    def __init__(self, policy: IntakePolicy = IntakePolicy.WHOLE_DOCUMENT) -> None:
        self._policy = policy
        self._file: UploadedFile | None = None

    @property
    def policy(self) -> IntakePolicy:
        return self._policy

    @property
    def current(self) -> UploadedFile | None:
        return self._file

    def accept(self, file: UploadedFile) -> UploadedFile:
        """Validate *file* and make it the file in flight.

        A rejected file leaves any previously accepted file in place.

        Raises:
            InvalidFileTypeError: if the MIME type does not match the policy.
        """
        if not self._policy.accepts(file.mime_type):
            Log.warning(
                f"Rejected {file.name}: type '{file.mime_type}' not accepted "
                f"by {self._policy.value} intake"
            )
            raise InvalidFileTypeError(self._policy.rejection_message)
        if self._file is not None:
            Log.debug(f"Replacing held file {self._file.name} with {file.name}")
        self._file = file
        Log.info(f"{file.name} is ready for processing ({file.size} bytes)")
        return file

    def require(self) -> UploadedFile:
        """Return the held file.

        Raises:
            MissingFileError: if no file has been accepted yet.
        """
        if self._file is None:
            if self._policy is IntakePolicy.WHOLE_DOCUMENT:
                raise MissingFileError("Please upload a PDF file first")
            raise MissingFileError("Please upload an image file first")
        return self._file

    def discard(self) -> None:
        self._file = None
