#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import datetime
import logging
import os
import platform
import sys
import time

# --- Paths ---
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))

# --- Logging Setup ---
def setup_logger(name="isogf"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(message)s', datefmt='%H:%M:%S')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger

def get_system_info():
    return {
        "timestamp": datetime.datetime.now().isoformat(),
        "hostname": platform.node(),
        "platform": platform.platform(),
        "python_implementation": platform.python_implementation(),
        "python_version": platform.python_version(),
    }

def time_call(func, args, num_runs):
    """Returns the wall-clock duration of each of *num_runs* calls of func(*args)."""
    times_taken = []
    for _ in range(num_runs):
        start = time.perf_counter()
        func(*args)
        end = time.perf_counter()
        times_taken.append(end - start)
    return times_taken
