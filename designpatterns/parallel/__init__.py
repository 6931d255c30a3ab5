"""Concurrency patterns: generator stream stages, threads, queues and semaphores."""