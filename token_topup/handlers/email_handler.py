"""Email notification functionality for the token top-up processor."""
import logging

from token_topup import config
from token_topup.models.schemas import Company, User

# Get loggers
debug_logger = logging.getLogger('debug')


def send_top_up_email(user: User, company: Company) -> bool:
    """Notify a user about their top-up.

    Delivery is not implemented: the message is only recorded in the debug
    log. A real mailer would be called from here.

    Args:
        user: The user that was topped up
        company: The company the top-up came from

    Returns:
        bool: True once the notification has been handled
    """
    debug_logger.debug(
        f"Top-up email from {config.EMAIL_SENDER} to {user.email}: "
        f"{company.top_up} tokens from {company.name}, new balance {user.tokens}"
    )
    return True
