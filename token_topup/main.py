# main.py
"""Main entry point for the token top-up processor.

Reads companies.json and users.json from the working directory, tops up the
tokens of every active user of a valid company and writes the report.

WARNING: output.txt, invalid_companies.json and invalid_users.json are
overwritten on every run. verification_log.txt is appended to.
"""
import os
import sys
import traceback

# Application modules
from token_topup import config
from token_topup.logger import setup_logging
from token_topup.models.schemas import Company, User
from token_topup.handlers.top_up_handler import process_top_ups
from token_topup.handlers.report_handler import write_report, write_invalid_records
from token_topup.utils.file_operations import load_json_file
from token_topup.utils.validators import partition_records, remove_duplicate_companies


def run_top_up():
    """Run the validate, top-up and report pipeline with proper setup and error handling.

    Returns:
        int: Process exit code, 1 if an input file could not be loaded
    """
    # Set up logging
    loggers = setup_logging()
    app_logger = loggers['app']
    error_logger = loggers['error']
    debug_logger = loggers['debug']
    verification_logger = loggers['verification']

    app_logger.info("Starting token top-up")
    debug_logger.debug(f"Working directory: {os.getcwd()}")

    try:
        # Load both inputs before producing any output
        json_companies, error = load_json_file(config.COMPANIES_FILE)
        if error:
            error_logger.critical(error)
            return 1
        json_users, error = load_json_file(config.USERS_FILE)
        if error:
            error_logger.critical(error)
            return 1

        # Verify data of companies, then drop duplicate ids
        valid_companies, invalid_companies = partition_records(
            json_companies, Company, 'Company', verification_logger
        )
        valid_companies = remove_duplicate_companies(
            valid_companies, invalid_companies, verification_logger
        )

        # Verify data of users
        valid_users, invalid_users = partition_records(
            json_users, User, 'User', verification_logger
        )

        summaries = process_top_ups(valid_companies, valid_users)
        write_report(summaries, config.OUTPUT_FILE)

        write_invalid_records(invalid_companies, config.INVALID_COMPANIES_FILE,
                              'companies', config.VERIFICATION_LOG_FILE)
        write_invalid_records(invalid_users, config.INVALID_USERS_FILE,
                              'users', config.VERIFICATION_LOG_FILE)
    except Exception as e:
        stack_trace = traceback.format_exc()
        error_logger.critical(f"Unhandled exception: {str(e)}\n{stack_trace}")
        return 1

    return 0


def main():
    sys.exit(run_top_up())


if __name__ == "__main__":
    main()
