# spatial_dbscan/console_logger.py

import logging
import os
from datetime import datetime


def setup_logging(output_dir='output', level=logging.INFO, log_to_file=True):
    """
    Configures logging to output to the console and a plain text file.

    Returns:
        str or None: Path of the text log file, or None when file logging is off.
    """
    # --- Create Handlers ---
    # 1. Console Handler (for live viewing)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    handlers = [console_handler]

    # 2. Text File Handler (for easy reading)
    log_filename_txt = None
    if log_to_file:
        os.makedirs(output_dir, exist_ok=True)
        log_filename_txt = os.path.join(
            output_dir, f"console_log_{datetime.now().strftime('%Y%m%d_%H%M%S')}.txt"
        )
        file_handler_txt = logging.FileHandler(log_filename_txt, mode='w')
        file_handler_txt.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(name)s - %(message)s'))
        handlers.append(file_handler_txt)

    # --- Configure Root Logger ---
    logging.basicConfig(
        level=level,
        handlers=handlers,
        force=True,
    )
    target = "console and text file" if log_to_file else "console"
    logging.info(f"Logging configured for {target}.")
    return log_filename_txt
