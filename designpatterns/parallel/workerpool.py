"""A fixed pool of worker threads processing numbered jobs."""

from __future__ import annotations

import queue
import threading
import time


def _worker(worker_id: int, jobs: queue.Queue, results: queue.Queue, job_duration: float) -> None:
    while (job := jobs.get()) is not None:
        print(f"Рабочий {worker_id} начал выполнение задачи {job}")
        time.sleep(job_duration)
        print(f"Рабочий {worker_id} завершил выполнение задачи {job}")
        results.put(job)


def worker_pool(num_jobs: int, num_workers: int, job_duration: float = 1.0) -> list[int]:
    """Run jobs 1..num_jobs on ``num_workers`` threads and return results as they arrive."""
    if num_jobs > 0 and num_workers < 1:
        raise ValueError("at least one worker is needed to run jobs")

    jobs: queue.Queue = queue.Queue()
    results: queue.Queue = queue.Queue()

    for worker_id in range(1, num_workers + 1):
        threading.Thread(
            target=_worker,
            args=(worker_id, jobs, results, job_duration),
            daemon=True,
        ).start()

    for job in range(1, num_jobs + 1):
        jobs.put(job)
    for _ in range(num_workers):
        jobs.put(None)

    collected = []
    for _ in range(num_jobs):
        result = results.get()
        print(f"Результат: {result}")
        collected.append(result)
    return collected