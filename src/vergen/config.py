"""Configuration for the version file generator.

A GeneratorConfig is built once per run and passed into the generator.
Language entries map a target language name to the file extension and
template used by the renderer in render.py.
"""

import os
from dataclasses import dataclass

DEFAULT_PACKAGE_NAME = "version"
DEFAULT_DIRTY_SUFFIX = "+"
DEFAULT_TIMEOUT = 15

# Used when 'git describe --tags' fails (e.g. a repo without tags)
FALLBACK_VERSION = "0.1.0"


# ---------------------------------------------------------------------------
# Output templates per language
# ---------------------------------------------------------------------------

GO_CONFIG = {
    "file_extension": ".go",
    "true": "true",
    "false": "false",
    "template": (
        "package {package_name}\n"
        "\n"
        "// auto generated by vergen, do not edit\n"
        "const (\n"
        "\tVgVersion = {version}\n"
        "\tVgHash    = {commit_hash}\n"
        "\tVgClean   = {clean}\n"
        ")\n"
    ),
}

PYTHON_CONFIG = {
    "file_extension": ".py",
    "true": "True",
    "false": "False",
    "template": (
        '"""Build version constants for the {package_name} package."""\n'
        "\n"
        "# auto generated by vergen, do not edit\n"
        "VG_VERSION = {version}\n"
        "VG_HASH = {commit_hash}\n"
        "VG_CLEAN = {clean}\n"
    ),
}

LANGUAGE_CONFIGS = {
    "go": GO_CONFIG,
    "python": PYTHON_CONFIG,
}

VALID_LANGUAGES = sorted(LANGUAGE_CONFIGS)


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings for a single generation run.

    ignore_files holds filename substrings whose changes don't make the
    tree dirty. When left as None it resolves to the base filename of the
    output file, so regenerating the file never marks the build dirty.
    """

    dirty_suffix: str = DEFAULT_DIRTY_SUFFIX
    ignore_files: tuple[str, ...] | None = None
    timeout: float = DEFAULT_TIMEOUT
    package_name: str = DEFAULT_PACKAGE_NAME
    language: str = "go"
    repo_dir: str = ""

    def __post_init__(self) -> None:
        if self.language not in LANGUAGE_CONFIGS:
            allowed = ", ".join(VALID_LANGUAGES)
            raise ValueError(f"Invalid language '{self.language}'. Allowed languages: {allowed}")
        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout}")
        if not self.package_name.isidentifier():
            raise ValueError(f"Invalid package name '{self.package_name}': must be a valid identifier")

    @property
    def language_config(self) -> dict:
        return LANGUAGE_CONFIGS[self.language]

    def default_output_path(self) -> str:
        """Return '<package_name>/<package_name>.<ext>'."""
        ext = self.language_config["file_extension"]
        return os.path.join(self.package_name, self.package_name + ext)

    def resolve_ignore_files(self, output_path: str) -> tuple[str, ...]:
        if self.ignore_files is not None:
            return tuple(self.ignore_files)
        return (os.path.basename(output_path),)
