from __future__ import annotations


class RestartIntoError(Exception):
    pass


class SpawnFailure(RestartIntoError):
    """External command could not be launched."""

    def __init__(self, command: str, cause: BaseException | None = None) -> None:
        self.command = command
        self.cause = cause
        detail = f': {cause}' if cause is not None else ''
        super().__init__(f'Could not run {command}{detail}')


class CommandNotFound(SpawnFailure):
    pass


class LaunchFailed(SpawnFailure):
    pass


class CommandFailure(RestartIntoError):
    def __init__(self, command: str, returncode: int, stderr: str = '') -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        msg = f'{command} exited with status {returncode}'
        if stderr.strip():
            msg += f': {stderr.strip()}'
        super().__init__(msg)


class NoOutput(RestartIntoError):
    def __init__(self, command: str, stderr: str = '') -> None:
        self.command = command
        self.stderr = stderr
        msg = f'{command} produced no output'
        if stderr.strip():
            msg += f': {stderr.strip()}'
        super().__init__(msg)


class InvalidBootId(RestartIntoError):
    def __init__(self, value) -> None:
        self.value = value
        super().__init__(f'Invalid boot id {value!r}: expected 4 hex digits, e.g. 0000')
