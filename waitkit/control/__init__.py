from .wait_for import PollPolicy, WaitForError, wait_for, wait_for_writer, wait_forM

__all__ = (
    # Policies
    "PollPolicy",
    # Polling
    "WaitForError",
    "wait_for",
    "wait_for_writer",
    "wait_forM",
)
