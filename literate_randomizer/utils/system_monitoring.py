#!/usr/bin/env python3
"""
System Monitoring Module

Measures process memory and wall time around expensive operations such as
building a chain from a large corpus, and logs the results as metrics.
"""

import os
import time
import psutil
from datetime import datetime


def get_memory_usage():
    """
    Get current process memory usage.

    Returns:
        dict: Resident memory of this process in MB and the system-wide
              memory usage percentage
    """
    process = psutil.Process(os.getpid())
    memory_info = process.memory_info()

    return {
        "current_mb": memory_info.rss / (1024 * 1024),
        "system_percent_used": psutil.virtual_memory().percent
    }


class ResourceMonitor:
    """
    Tracks duration and memory growth of one operation at a time.
    """

    def __init__(self, logger):
        """
        Initialize the resource monitor.

        Args:
            logger: Logger instance for recording resource metrics
        """
        self.logger = logger
        self.current_operation = None
        self.operation_start_time = None
        self.start_memory_mb = None

    def start(self, operation_name=None):
        """
        Start measuring an operation.

        Args:
            operation_name (str, optional): Name of the operation being monitored
        """
        self.current_operation = operation_name
        self.operation_start_time = time.time()
        self.start_memory_mb = get_memory_usage()["current_mb"]

        self.logger.debug(f"Resource monitoring started for operation: {operation_name}", extra={
            "metrics": {
                "operation": operation_name,
                "memory_mb": self.start_memory_mb,
                "timestamp": datetime.now().isoformat()
            }
        })

    def stop(self):
        """
        Stop measuring and log the result.

        Returns:
            dict: Operation name, duration in seconds, final memory and memory
                  delta in MB; empty if no operation was started
        """
        if self.operation_start_time is None:
            return {}

        memory = get_memory_usage()
        result = {
            "operation": self.current_operation,
            "duration": time.time() - self.operation_start_time,
            "memory_mb": memory["current_mb"],
            "memory_delta_mb": memory["current_mb"] - self.start_memory_mb,
            "system_percent_used": memory["system_percent_used"]
        }

        self.logger.debug("Resource monitoring stopped", extra={"metrics": result})

        self.current_operation = None
        self.operation_start_time = None
        self.start_memory_mb = None

        return result
