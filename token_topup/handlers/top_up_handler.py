"""Top-up processing logic for the token top-up processor."""
import logging
from typing import List, Optional

from token_topup.handlers.email_handler import send_top_up_email
from token_topup.models.schemas import Company, CompanyTopUpSummary, User, UserTopUp

# Get loggers
app_logger = logging.getLogger('app')
debug_logger = logging.getLogger('debug')


def is_email_eligible(user: User, company: Company) -> bool:
    """A user is emailed only if both the user and the company allow it."""
    return user.email_status and company.email_status


def select_eligible_users(company: Company, valid_users: List[User]) -> List[User]:
    """Return the active users of a company sorted by last name.

    The sort is stable, so users sharing a last name keep their input order.
    """
    users_in_company = [
        user for user in valid_users
        if user.company_id == company.id and user.active_status is True
    ]
    return sorted(users_in_company, key=lambda user: user.last_name)


def process_user_top_ups(company: Company, users_in_company: List[User],
                         summary: CompanyTopUpSummary) -> None:
    """Top up each user and file them under emailed or not emailed."""
    for user in users_in_company:
        previous_token_balance = user.tokens
        user.tokens += company.top_up
        top_up = UserTopUp(user=user, previous_tokens=previous_token_balance)

        if is_email_eligible(user, company):
            send_top_up_email(user, company)
            summary.users_emailed.append(top_up)
        else:
            summary.users_not_emailed.append(top_up)


def process_company_top_ups(company: Company, valid_users: List[User]) -> Optional[CompanyTopUpSummary]:
    """Top up every eligible user of a company.

    Args:
        company: A valid, non-duplicate company
        valid_users: All users that passed validation

    Returns:
        The company summary, or None if the company has no active users
    """
    users_in_company = select_eligible_users(company, valid_users)

    # Only proceed if the company has any valid and active users to top up
    if not users_in_company:
        debug_logger.debug(f"Company {company.id} has no active users, skipping")
        return None

    summary = CompanyTopUpSummary(company=company)
    process_user_top_ups(company, users_in_company, summary)
    debug_logger.debug(
        f"Company {company.id}: topped up {summary.user_count} users, total {summary.total}"
    )
    return summary


def process_top_ups(valid_companies: List[Company], valid_users: List[User]) -> List[CompanyTopUpSummary]:
    """Run the top-up for each company in the given order.

    Companies without eligible users are left out of the result.
    """
    summaries = []
    for company in valid_companies:
        summary = process_company_top_ups(company, valid_users)
        if summary is not None:
            summaries.append(summary)
    app_logger.info(f"Processed top-ups for {len(summaries)} of {len(valid_companies)} companies")
    return summaries
