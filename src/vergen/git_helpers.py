"""Git operation helpers: version lookups and uncommitted-change detection."""

from vergen.config import GeneratorConfig
from vergen.utils import run_command


def git_args(*args: str, repo_dir: str = "") -> list[str]:
    """Build a git command line, pinned to *repo_dir* when given."""
    if repo_dir:
        return ["git", "-C", repo_dir, *args]
    return ["git", *args]


def describe_tags(config: GeneratorConfig) -> str:
    """Return the output of 'git describe --tags'."""
    return run_command(git_args("describe", "--tags", repo_dir=config.repo_dir), config.timeout)


def current_commit(config: GeneratorConfig) -> str:
    """Return the full SHA1 of HEAD."""
    return run_command(git_args("rev-parse", "HEAD", repo_dir=config.repo_dir), config.timeout)


def diff_index(config: GeneratorConfig) -> str:
    """Return 'git diff-index HEAD' output: one changed path per line."""
    return run_command(git_args("diff-index", "HEAD", repo_dir=config.repo_dir), config.timeout)


def split_lines(text: str) -> list[str]:
    """Split command output into lines.

    Pure function: empty or whitespace-only text gives no lines at all,
    rather than a single empty one.
    """
    stripped = text.strip()
    if not stripped:
        return []
    return stripped.split("\n")


def has_uncommitted_changes(diff_listing: str, ignore_files: tuple[str, ...] | list[str]) -> bool:
    """Check whether a diff listing contains any change that isn't ignored.

    Pure function: a line counts as a real change when it contains none of
    the *ignore_files* substrings. Stops at the first such line.
    """
    for line in split_lines(diff_listing):
        if not any(ignored in line for ignored in ignore_files):
            return True
    return False
