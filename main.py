# main.py

import sys

from spatial_dbscan.console_logger import setup_logging


def main(argv=None):
    """
    Main entry point for Spatial DBSCAN.

    With a point file argument the file is clustered straight away in batch
    mode; otherwise the user picks between the live viewer and batch mode.
    """
    argv = sys.argv[1:] if argv is None else argv
    if argv:
        setup_logging()
        from spatial_dbscan.main_batch import run_batch
        return run_batch(points_path=argv[0])

    print("--- Welcome to Spatial DBSCAN ---")

    while True:
        mode = input("Select mode: (1) Live Viewer or (2) Batch Clustering from File\nEnter choice (1 or 2): ")
        if mode in ['1', '2']:
            break
        print("Invalid choice. Please enter 1 or 2.")

    if mode == '1':
        # The viewer configures its own logging; PyQt5 is only needed here
        from spatial_dbscan.main_live import main as main_live
        main_live()
    else:
        setup_logging()
        print("\nStarting in BATCH mode...")
        from spatial_dbscan.main_batch import run_batch
        return run_batch()


if __name__ == '__main__':
    main()
