"""Version file generator: gathers git state and writes the constants file.

The tag lookup is the only soft failure: a repo without tags still gets a
version file, using FALLBACK_VERSION. Failing to read the commit hash or
the list of uncommitted changes aborts the run before anything is written.
"""

from vergen.config import FALLBACK_VERSION, GeneratorConfig
from vergen.git_helpers import (
    current_commit,
    describe_tags,
    diff_index,
    has_uncommitted_changes,
)
from vergen.render import VersionInfo, write_version_file
from vergen.utils import CommandError, log


def create(config: GeneratorConfig | None = None) -> VersionInfo:
    """Write the version file at the config's default path.

    The default path is '<package_name>/<package_name>.<ext>', relative to
    the current directory.
    """
    config = config or GeneratorConfig()
    return create_file(config.default_output_path(), config)


def create_file(path: str, config: GeneratorConfig | None = None) -> VersionInfo:
    """Gather version info from git and write it to *path*.

    Returns the VersionInfo that was written. Raises CommandError when the
    commit hash or uncommitted changes can't be read, and OSError when the
    file can't be written.
    """
    config = config or GeneratorConfig()

    try:
        tag = describe_tags(config)
    except CommandError as exc:
        log(f"No tag description ({exc}), using {FALLBACK_VERSION}", style="yellow")
        tag = FALLBACK_VERSION

    commit = current_commit(config)
    changes = diff_index(config)
    dirty = has_uncommitted_changes(changes, config.resolve_ignore_files(path))

    info = VersionInfo(
        tag_description=tag,
        commit_hash=commit,
        is_dirty=dirty,
        dirty_suffix=config.dirty_suffix,
    )

    log(f"Setting VgVersion to: {info.version}")
    log(f"Setting VgHash to: {info.commit_hash}")
    log(f"Setting VgClean to: {info.clean}")

    write_version_file(path, info, config)
    return info
