from loguru import logger

from rush.config import DEFAULT_PATH


class PathRegistry:
    """
    Ordered list of directories searched for external commands.

    Only the `path` built-in changes it, and always by replacing the whole
    list. An empty registry resolves nothing.
    """

    def __init__(self, directories=None):
        self._directories = list(DEFAULT_PATH if directories is None else directories)

    @property
    def directories(self):
        return list(self._directories)

    def reset_and_set(self, directories):
        # Swap in a complete list; never mutate the current one.
        new_dirs = [str(d) for d in directories]
        self._directories = new_dirs
        logger.debug(f"path registry set to {new_dirs}")

    def resolve(self, command_name):
        """Yield `directory/command_name` for each directory, in order."""
        for directory in self._directories:
            yield f"{directory}/{command_name}"

    def __len__(self):
        return len(self._directories)

    def __eq__(self, other):
        if not isinstance(other, PathRegistry):
            return NotImplemented
        return self._directories == other._directories

    def __repr__(self):
        return f"PathRegistry({self._directories!r})"
