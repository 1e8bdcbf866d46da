"""Rendering and writing of the generated version file."""

import os
from dataclasses import dataclass

from vergen.config import DEFAULT_DIRTY_SUFFIX, GeneratorConfig


@dataclass(frozen=True)
class VersionInfo:
    """Version data gathered from git for one generation run."""

    tag_description: str
    commit_hash: str
    is_dirty: bool
    dirty_suffix: str = DEFAULT_DIRTY_SUFFIX

    @property
    def version(self) -> str:
        if self.is_dirty:
            return self.tag_description + self.dirty_suffix
        return self.tag_description

    @property
    def clean(self) -> bool:
        return not self.is_dirty


def quote(value: str) -> str:
    """Quote a value as a double-quoted string literal valid in Go and Python."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def render_version_file(info: VersionInfo, config: GeneratorConfig) -> str:
    """Render the version file contents for the configured language.

    Pure function: returns the text, touches nothing on disk.
    """
    lang = config.language_config
    return lang["template"].format(
        package_name=config.package_name,
        version=quote(info.version),
        commit_hash=quote(info.commit_hash),
        clean=lang["true"] if info.clean else lang["false"],
    )


def write_version_file(path: str, info: VersionInfo, config: GeneratorConfig) -> None:
    """Write the rendered version file, creating its directory if needed.

    Overwrites any existing file. OSError propagates to the caller.
    """
    content = render_version_file(info, config)
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
