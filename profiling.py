import gc
import os
import threading
import time
from functools import wraps

import psutil

MEM_SAMPLE_INTERVAL = 0.01


class MemoryMonitor(threading.Thread):
    """内存监控线程，记录进程 RSS 峰值（字节）"""

    def __init__(self, interval=MEM_SAMPLE_INTERVAL):
        super().__init__(daemon=True)
        self.interval = interval
        self.peak = 0
        self.running = True

    def run(self):
        proc = psutil.Process(os.getpid())
        self.peak = proc.memory_info().rss
        while self.running:
            try:
                self.peak = max(self.peak, proc.memory_info().rss)
            except psutil.Error:
                break
            time.sleep(self.interval)

    def stop(self):
        self.running = False


def experiment(name):
    """运行被装饰函数并统计耗时和相对内存峰值（MB）"""

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            gc.collect()
            base_mem = psutil.Process().memory_info().rss
            monitor = MemoryMonitor()
            monitor.start()
            start_time = time.time()
            try:
                result = func(*args, **kwargs)
            finally:
                elapsed = time.time() - start_time
                monitor.stop()
                monitor.join()
            peak = max(monitor.peak, base_mem)
            return {"name": name, "time": elapsed, "memory": (peak - base_mem) / (1024**2), "result": result}

        return wrapper

    return decorator
