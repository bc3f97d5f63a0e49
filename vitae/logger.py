"""
Logging for vitae.

Thin wrapper over loguru with an automatic [vitae] prefix. All vitae modules
import from here rather than from loguru directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = '[vitae]'


def setup_logger(log_dir: Path, *, level: str = 'DEBUG') -> Path:
    """
    Add a file sink for this process under ``log_dir``.

    Args:
        log_dir: Directory for the log file (created if missing)
        level: Minimum level written to the file

    Returns:
        Path to log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / 'vitae.log'
    logger.add(log_file, level=level, rotation='5 MB', enqueue=False)
    return log_file


def info(message: str) -> None:
    logger.info(f'{CONTEXT_PREFIX} {message}')


def success(message: str) -> None:
    logger.success(f'{CONTEXT_PREFIX} {message}')


def warning(message: str) -> None:
    logger.warning(f'{CONTEXT_PREFIX} {message}')


def error(message: str) -> None:
    logger.error(f'{CONTEXT_PREFIX} {message}')


def debug(message: str) -> None:
    logger.debug(f'{CONTEXT_PREFIX} {message}')


# Domain helpers


def log_render_dispatch_miss(item_type: str, item_id: str) -> None:
    """An item type had no custom or built-in renderer."""
    debug(f"No renderer for item type '{item_type}' (item {item_id}); skipped")


def log_template_fallback(template_name: str, exc: Exception) -> None:
    error(f"Failed to load template '{template_name}': {exc}")


def log_generation_result(template_name: str, size: int, elapsed: float) -> None:
    debug(f"Generated '{template_name}' document: {size} bytes ({elapsed:.3f}s)")


def log_preview_state(pipeline_id: int, state: str) -> None:
    debug(f'preview#{pipeline_id} -> {state}')
