#===============================================================================
#  LaunchGrid | log_setup.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  structlog configuration: rotating log file plus rich console output.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

import colorama
import structlog
from rich.logging import RichHandler
from structlog.processors import TimeStamper, add_log_level
from structlog.stdlib import BoundLogger, ProcessorFormatter, add_logger_name

LOG_FILE_PATH = os.path.expanduser("~/.config/launchgrid/launchgrid.log")
LOGGER_NAME = "launchgrid"


def _console_renderer() -> structlog.dev.ConsoleRenderer:
    return structlog.dev.ConsoleRenderer(
        columns=[
            # timestamp without the key name, yellow
            structlog.dev.Column(
                "timestamp",
                structlog.dev.KeyValueColumnFormatter(
                    key_style=None,
                    value_style=colorama.Fore.YELLOW,
                    reset_style=colorama.Style.RESET_ALL,
                    value_repr=str,
                ),
            ),
            # event without the key name, bright magenta
            structlog.dev.Column(
                "event",
                structlog.dev.KeyValueColumnFormatter(
                    key_style=None,
                    value_style=colorama.Style.BRIGHT + colorama.Fore.MAGENTA,
                    reset_style=colorama.Style.RESET_ALL,
                    value_repr=str,
                ),
            ),
            # everything else: cyan key, green value
            structlog.dev.Column(
                "",
                structlog.dev.KeyValueColumnFormatter(
                    key_style=colorama.Fore.CYAN,
                    value_style=colorama.Fore.GREEN,
                    reset_style=colorama.Style.RESET_ALL,
                    value_repr=str,
                ),
            ),
        ]
    )


def _plain_renderer() -> structlog.processors.KeyValueRenderer:
    return structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"])


def setup_logging(level: int = logging.INFO, log_file: str = LOG_FILE_PATH) -> BoundLogger:
    """Configure file + console handlers on the package logger and route
    structlog through it. Safe to call more than once.

    The file always gets plain key=value lines; the console gets the colored
    renderer in debug mode.
    """
    os.makedirs(os.path.dirname(log_file), exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=1024 * 1024,  # 1 MB per log file
        backupCount=2,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(
        ProcessorFormatter(processors=[ProcessorFormatter.remove_processors_meta, _plain_renderer()])
    )
    logger.addHandler(file_handler)

    console_handler = RichHandler(rich_tracebacks=True, markup=False, show_path=False)
    console_handler.setFormatter(
        ProcessorFormatter(
            processors=[
                ProcessorFormatter.remove_processors_meta,
                _console_renderer() if level <= logging.DEBUG else _plain_renderer(),
            ]
        )
    )
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    logger.propagate = False

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            add_log_level,
            add_logger_name,
            TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger(LOGGER_NAME)
