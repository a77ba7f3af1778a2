# renderer/parallel.py
import logging
import random
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List
import numpy as np
from pathtracer.config import RENDER_SETTINGS
from pathtracer.core.utils import seed_thread_rng
from pathtracer.renderer.estimator import ray_color

logger = logging.getLogger(__name__)

def split_samples(total: int, workers: int) -> List[int]:
    """
    Divide `total` samples per pixel between `workers`. The first
    `total % workers` workers take one extra sample so the counts add up
    to exactly `total`.
    """
    if workers < 1:
        raise ValueError(f"worker count must be at least 1, got {workers}")
    if total < 0:
        raise ValueError(f"sample count must not be negative, got {total}")
    base, remainder = divmod(total, workers)
    return [base + 1 if i < remainder else base for i in range(workers)]

def _check_positive(**values):
    for name, value in values.items():
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")

def _worker_seeds(seed, worker_count: int) -> List[int]:
    """Independent integer seeds, one per worker, spawned from `seed`."""
    seeds = []
    for child in np.random.SeedSequence(seed).spawn(worker_count):
        seeds.append(int.from_bytes(child.generate_state(4).tobytes(), "little"))
    return seeds

def render_worker(index: int, world, background, camera,
                  image_width: int, image_height: int,
                  samples: int, max_depth: int, rng) -> np.ndarray:
    """
    Render the whole image with `samples` samples per pixel into a private
    buffer of unnormalized RGB sums. Row 0 of the buffer is the top scanline.
    """
    pixels = np.zeros((image_height, image_width, 3), dtype=np.float64)
    if samples == 0:
        return pixels

    # Code paths that cannot take an explicit generator use the thread's own.
    seed_thread_rng(rng.getrandbits(64))

    u_scale = 1.0 / max(image_width - 1, 1)
    v_scale = 1.0 / max(image_height - 1, 1)
    report_every = max(1, image_height // 10)

    for j in range(image_height):
        if index == 0 and j % report_every == 0:
            logger.info("Worker 0: scanlines remaining %d (%d%%)",
                        image_height - j, round(100.0 * j / image_height))
        row = image_height - 1 - j
        for i in range(image_width):
            r = g = b = 0.0
            for _ in range(samples):
                u = (i + rng.random()) * u_scale
                v = (j + rng.random()) * v_scale
                color = ray_color(camera.get_ray(u, v, rng), world, background, max_depth, rng)
                r += color.x
                g += color.y
                b += color.z
            pixels[row, i, 0] = r
            pixels[row, i, 1] = g
            pixels[row, i, 2] = b

    if index == 0:
        logger.info("Worker 0: scanlines remaining 0 (100%)")
    return pixels

def render(world, background, camera, image_width: int, image_height: int,
           samples_per_pixel: int, max_depth: int, worker_count: int,
           seed=None) -> np.ndarray:
    """
    Render `world` as seen by `camera` using `worker_count` threads.

    Every worker renders the full image with its share of the samples; the
    calling thread is worker 0. The result is the elementwise sum of all
    worker buffers, shape (image_height, image_width, 3), holding
    unnormalized linear RGB sums. Pass `seed` for a reproducible render.
    If any worker raises, the exception propagates and no image is returned.
    """
    _check_positive(image_width=image_width, image_height=image_height,
                    samples_per_pixel=samples_per_pixel, max_depth=max_depth,
                    worker_count=worker_count)

    counts = split_samples(samples_per_pixel, worker_count)
    rngs = [random.Random(s) for s in _worker_seeds(seed, worker_count)]
    logger.info("Rendering %dx%d, %d samples/pixel, depth %d, %d workers %s",
                image_width, image_height, samples_per_pixel, max_depth,
                worker_count, counts)
    start = time.perf_counter()

    def job(index: int) -> np.ndarray:
        return render_worker(index, world, background, camera, image_width,
                             image_height, counts[index], max_depth, rngs[index])

    with ThreadPoolExecutor(max_workers=max(worker_count - 1, 1),
                            thread_name_prefix="render") as executor:
        futures = [executor.submit(job, index) for index in range(1, worker_count)]
        try:
            pixels = job(0)
        except BaseException:
            for future in futures:
                future.cancel()
            raise

        # result() re-raises any exception raised inside the worker.
        for index, future in enumerate(futures, start=1):
            logger.debug("Waiting for worker %d of %d", index + 1, worker_count)
            pixels += future.result()

    logger.info("Render finished in %.2fs", time.perf_counter() - start)
    return pixels

class Renderer:
    """
    Holds the output size and sampling settings for repeated renders.
    Defaults come from config.RENDER_SETTINGS.
    """
    def __init__(self, width: int, height: int,
                 samples_per_pixel: int = RENDER_SETTINGS['samples_per_pixel'],
                 max_depth: int = RENDER_SETTINGS['max_depth'],
                 workers: int = RENDER_SETTINGS['workers']):
        _check_positive(width=width, height=height, samples_per_pixel=samples_per_pixel,
                        max_depth=max_depth, workers=workers)
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.workers = workers

    def render(self, world, background, camera, seed=None) -> np.ndarray:
        return render(world, background, camera, self.width, self.height,
                      self.samples_per_pixel, self.max_depth, self.workers, seed)
