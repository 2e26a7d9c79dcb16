from hostprobe.process.manager import kill_process, kill_process_async

__all__ = ["kill_process", "kill_process_async"]
