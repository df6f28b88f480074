# scenebake/multithread/task_pool.py
# ---------------------------------------------------------------
# Простой пул задач на основе concurrent.futures.
# Группы одного файла независимы (атрибуты после прохода 2 только
# читаются), поэтому dedup + tangents можно раздать по потокам.
# ---------------------------------------------------------------

from concurrent.futures import ThreadPoolExecutor


class TaskPool:
    """Пул потоков; результаты возвращаются в порядке постановки задач."""
    def __init__(self, max_workers=None):
        self.executor = ThreadPoolExecutor(max_workers=max_workers)
        self.futures = []
        self._shutdown = False

    def submit(self, fn, *args, **kwargs):
        """Отправить задачу в пул, вернуть Future."""
        if self._shutdown:
            raise RuntimeError("TaskPool already shut down")
        future = self.executor.submit(fn, *args, **kwargs)
        self.futures.append(future)
        return future

    def wait_all(self):
        """Дождаться всех задач; результаты – в порядке submit()."""
        futures, self.futures = self.futures, []
        return [f.result() for f in futures]   # пробрасывает исключения

    def shutdown(self, wait=True):
        self._shutdown = True
        self.executor.shutdown(wait=wait, cancel_futures=not wait)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown(wait=exc_type is None)
