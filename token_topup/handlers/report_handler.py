"""Report generation for the token top-up processor."""
import logging
from typing import Any, Dict, List

from token_topup.models.schemas import Company, CompanyTopUpSummary, UserTopUp
from token_topup.utils.file_operations import write_json_file, write_text_file

# Get loggers
app_logger = logging.getLogger('app')


def company_header(company: Company) -> str:
    return f"\n\tCompany Id: {company.id}\n\tCompany Name: {company.name}"


def user_top_up_line(top_up: UserTopUp) -> str:
    user = top_up.user
    return (f"\t\t{user.last_name}, {user.first_name}, {user.email}\n"
            f"\t\t  Previous Token Balance, {top_up.previous_tokens}\n"
            f"\t\t  New Token Balance {top_up.new_tokens}")


def company_footer(summary: CompanyTopUpSummary) -> str:
    return f"\t\tTotal amount of top ups for {summary.company.name}: {summary.total}"


def format_company_summary(summary: CompanyTopUpSummary) -> List[str]:
    """Render one company block as report lines."""
    lines = [company_header(summary.company), "\tUsers Emailed:"]
    lines.extend(user_top_up_line(top_up) for top_up in summary.users_emailed)
    lines.append("\tUsers Not Emailed:")
    lines.extend(user_top_up_line(top_up) for top_up in summary.users_not_emailed)
    lines.append(company_footer(summary))
    return lines


def write_report(summaries: List[CompanyTopUpSummary], output_path: str) -> None:
    """Write the top-up report.

    WARNING: an existing file at output_path is overwritten.

    Args:
        summaries: Company summaries in the order they should appear
        output_path: Path of the text report
    """
    lines = []
    for summary in summaries:
        lines.extend(format_company_summary(summary))
    write_text_file(output_path, lines)
    app_logger.info(f"{output_path} generated successfully!")


def write_invalid_records(records: List[Dict[str, Any]], output_path: str,
                          kind: str, log_path: str) -> bool:
    """Write rejected records to a JSON file if there are any.

    WARNING: an existing file at output_path is overwritten when written.

    Args:
        records: Records that failed validation
        output_path: Path of the JSON file
        kind: Plural record kind used in messages, e.g. "companies"
        log_path: Verification log the user is pointed to

    Returns:
        bool: True if the file was written
    """
    if not records:
        return False

    app_logger.info(
        f"There are {kind} with bad format, generating a list of bad {kind} in {output_path}"
    )
    app_logger.info(f"Check {log_path} for details")
    write_json_file(output_path, records)
    return True
