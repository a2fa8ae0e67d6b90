"""Logging configuration module for the token top-up processor."""
import os
import sys
import logging
from logging.handlers import RotatingFileHandler

from token_topup import config


HANDLER_PREFIX = "token_topup."


def _add_handler(logger, handler, name):
    handler.set_name(HANDLER_PREFIX + name)
    logger.addHandler(handler)


def _reset_handlers(logger):
    """Detach and close handlers left by a previous setup_logging() call."""
    for handler in list(logger.handlers):
        if not (handler.get_name() or "").startswith(HANDLER_PREFIX):
            continue
        logger.removeHandler(handler)
        handler.close()


def setup_logging():
    """Set up logging with appropriate handlers and formatters."""
    # Ensure logs directory exists
    os.makedirs(config.LOGS_FOLDER, exist_ok=True)

    # Log file paths
    app_log_path = os.path.join(config.LOGS_FOLDER, 'app.log')
    error_log_path = os.path.join(config.LOGS_FOLDER, 'error.log')
    debug_log_path = os.path.join(config.LOGS_FOLDER, 'debug.log')

    # Log formatters
    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s - %(message)s'
    )
    simple_formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
    console_formatter = logging.Formatter('%(message)s')
    verification_formatter = logging.Formatter(
        '[%(asctime)s] %(message)s', datefmt=config.VERIFICATION_TIMESTAMP_FORMAT
    )

    # Configure root logger
    root_logger = logging.getLogger()
    _reset_handlers(root_logger)
    root_logger.setLevel(logging.DEBUG if config.DEBUG else logging.INFO)

    # Console handler for progress messages and diagnostics
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(logging.INFO)
    _add_handler(root_logger, console_handler, "console")

    # 1. App Logger (INFO level)
    app_logger = logging.getLogger('app')
    _reset_handlers(app_logger)
    app_logger.setLevel(logging.INFO)
    app_handler = RotatingFileHandler(
        app_log_path, maxBytes=5*1024*1024, backupCount=5
    )
    app_handler.setFormatter(simple_formatter)
    app_handler.setLevel(logging.INFO)
    _add_handler(app_logger, app_handler, "app")

    # 2. Error Logger (ERROR level)
    error_logger = logging.getLogger('error')
    _reset_handlers(error_logger)
    error_logger.setLevel(logging.ERROR)
    error_handler = RotatingFileHandler(
        error_log_path, maxBytes=2*1024*1024, backupCount=10
    )
    error_handler.setFormatter(detailed_formatter)
    error_handler.setLevel(logging.ERROR)
    _add_handler(error_logger, error_handler, "error")

    # 3. Debug Logger (DEBUG level)
    debug_logger = logging.getLogger('debug')
    _reset_handlers(debug_logger)
    debug_logger.setLevel(logging.DEBUG if config.DEBUG else logging.INFO)
    debug_handler = RotatingFileHandler(
        debug_log_path, maxBytes=10*1024*1024, backupCount=3
    )
    debug_handler.setFormatter(detailed_formatter)
    debug_handler.setLevel(logging.DEBUG if config.DEBUG else logging.INFO)
    _add_handler(debug_logger, debug_handler, "debug")

    # 4. Verification Logger: every defect goes to the append-only log and stdout
    verification_logger = logging.getLogger('verification')
    _reset_handlers(verification_logger)
    verification_logger.setLevel(logging.WARNING)
    verification_logger.propagate = False
    verification_file_handler = logging.FileHandler(
        config.VERIFICATION_LOG_FILE, mode='a', encoding='utf-8', delay=True
    )
    verification_file_handler.setFormatter(verification_formatter)
    _add_handler(verification_logger, verification_file_handler, "verification_file")
    verification_console_handler = logging.StreamHandler(sys.stdout)
    verification_console_handler.setFormatter(verification_formatter)
    _add_handler(verification_logger, verification_console_handler, "verification_console")

    return {
        'app': app_logger,
        'error': error_logger,
        'debug': debug_logger,
        'verification': verification_logger
    }



def teardown_logging():
    """Remove every handler installed by setup_logging()."""
    for name in (None, 'app', 'error', 'debug', 'verification'):
        logger = logging.getLogger(name)
        _reset_handlers(logger)
    logging.getLogger('verification').propagate = True
