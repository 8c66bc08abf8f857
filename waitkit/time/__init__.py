from .sleep import delay, delay_writer, delayM, sleep
from .wait import WaitPolicy, pending_count, wait, wait_writer, waitM

__all__ = (
    # Sleep / delay
    "sleep",
    "delay",
    "delay_writer",
    "delayM",
    # Wait
    "WaitPolicy",
    "pending_count",
    "wait",
    "wait_writer",
    "waitM",
)
