"""
Version bump transform.

Bumps the ``version`` field of a JSON manifest flowing through a file
pipeline, then optionally regenerates the lock file next to it.

Processing of one unit
----------------------
1. Null units pass through untouched.
2. Streams and binary contents are rejected.
3. The text is parsed, the version incremented and the document serialized
   again with the original indentation and final newline.
4. The unit is emitted downstream.
5. If enabled, the lock command runs in the manifest's directory. Its
   outcome is logged and never raised.

Usage
-----
    from bumpforge import bump_transform
    from bumpforge.core.pipeline import ManifestFile

    transform = bump_transform("minor", {"regenerateLock": False})
    for bumped in transform.pipe([ManifestFile.from_path("package.json")]):
        bumped.write()
"""

from collections.abc import Mapping
from typing import Any, Iterator, Optional, Union

from pydantic import ValidationError

from bumpforge.core.config import TransformOptions
from bumpforge.core.exceptions import (
    ConfigValidationError,
    InvalidFileKindError,
    ManifestParseError,
    UnsupportedInputKindError,
    VersionComputeError,
)
from bumpforge.core.logging import get_logger
from bumpforge.core.manifest import FormattingProfile, ManifestDocument
from bumpforge.core.pipeline.command_runner import (
    CommandRunner,
    SubprocessCommandRunner,
)
from bumpforge.core.pipeline.file_unit import ManifestFile
from bumpforge.core.pipeline.interfaces import Emit, FileTransform
from bumpforge.core.versioning import BumpType, increment_version, resolve_bump_type

logger = get_logger(__name__)

MAJOR = BumpType.MAJOR.value
MINOR = BumpType.MINOR.value
PATCH = BumpType.PATCH.value
DEFAULT = PATCH

OptionsLike = Union[TransformOptions, Mapping, None]


def _discard(file: ManifestFile) -> None:
    pass


def coerce_options(options: OptionsLike) -> TransformOptions:
    """
    Build TransformOptions from whatever the caller passed.

    Raises:
        ConfigValidationError: If a mapping cannot be turned into options.
    """
    if options is None:
        return TransformOptions()
    if isinstance(options, TransformOptions):
        return options
    if isinstance(options, Mapping):
        try:
            return TransformOptions.model_validate(dict(options))
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"])
            raise ConfigValidationError(
                f"Invalid option {field}: {first['msg']}",
                field=field,
                value=first.get("input"),
            ) from e
    raise ConfigValidationError(
        f"Options must be a mapping, got {type(options).__name__}",
        value=options,
    )


class VersionBumpTransform(FileTransform):
    """Bumps the version of JSON manifests."""

    def __init__(
        self,
        bump_type: Optional[Any] = None,
        options: OptionsLike = None,
        runner: Optional[CommandRunner] = None,
    ) -> None:
        self.options = coerce_options(options)
        requested = bump_type if isinstance(bump_type, str) else None
        if requested is None:
            requested = self.options.fallback_bump_type
        self.bump_type: BumpType = resolve_bump_type(requested)
        self.runner = runner or SubprocessCommandRunner()

    def is_available(self) -> bool:
        """Lock regeneration needs its program on PATH."""
        if not self.options.regenerate_lock:
            return True
        return self.runner.is_available(self.options.lock_command)

    def process(self, file: ManifestFile, emit: Optional[Emit] = None) -> None:
        for _ in self._stages(file, emit or _discard):
            pass

    def _stages(self, file: ManifestFile, emit: Emit) -> Iterator[None]:
        if file.is_null():
            emit(file)
            return

        if file.is_stream():
            raise UnsupportedInputKindError("Streaming not supported", file.path)

        if file.is_binary():
            raise InvalidFileKindError(
                f'File "{file.basename}" on "{file.path}" must be a text file',
                file.path,
            )

        self._bump(file)
        emit(file)
        yield

        if self.options.regenerate_lock:
            self._regenerate_lock(file)

    def _bump(self, file: ManifestFile) -> None:
        """Replace the contents of a buffered unit with the bumped manifest."""
        original = file.text()
        profile = FormattingProfile.detect(original)

        try:
            document = ManifestDocument.parse(original)
        except ValueError as e:
            raise ManifestParseError(str(e), file.path) from e

        old_version = document.version
        try:
            new_version = increment_version(old_version, self.bump_type)
        except ValueError as e:
            raise VersionComputeError(str(e), file.path) from e

        document.version = new_version
        content = document.to_text(
            indent=self.options.effective_spaces(profile.indent_width),
            final_newline=profile.final_newline,
        )

        # Lone surrogates from \uXXXX escapes go back out as the same escapes
        file.contents = content.encode("utf-8", errors="backslashreplace")
        logger.info(
            f"Increased version to {new_version} ({self.bump_type.value}) "
            f"from {old_version}"
        )

    def _regenerate_lock(self, file: ManifestFile) -> None:
        """Run the lock command next to the manifest; failures are logged only."""
        logger.info("Regenerate package-lock.json")
        working_directory = file.dirname

        try:
            exit_code = self.runner.run(working_directory, self.options.lock_command)
        except Exception as e:
            logger.warning(
                "Lock regeneration failed",
                command=" ".join(self.options.lock_command),
                cwd=working_directory,
                error=f"{type(e).__name__}: {e}",
            )
            return

        if exit_code != 0:
            logger.warning(
                "Lock regeneration exited with non-zero status",
                command=" ".join(self.options.lock_command),
                cwd=working_directory,
                exit_code=exit_code,
            )


def bump_transform(
    bump_type: Optional[Any] = None,
    options: OptionsLike = None,
    *,
    runner: Optional[CommandRunner] = None,
) -> VersionBumpTransform:
    """
    Create a version bump transform.

    Args:
        bump_type: "major", "minor" or "patch" (also "-minor", "--minor", any
            case). Non-string values fall back to options.fallback_bump_type;
            unrecognized strings mean "patch".
        options: TransformOptions or a mapping of option names to values.
        runner: Command runner for lock regeneration.

    Returns:
        A VersionBumpTransform.
    """
    return VersionBumpTransform(bump_type, options, runner)


bump_transform.MAJOR = MAJOR  # type: ignore[attr-defined]
bump_transform.MINOR = MINOR  # type: ignore[attr-defined]
bump_transform.PATCH = PATCH  # type: ignore[attr-defined]
bump_transform.DEFAULT = DEFAULT  # type: ignore[attr-defined]
