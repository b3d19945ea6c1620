import logging

from api.contact.schemas import ContactRequest

logger = logging.getLogger(__name__)


def submit_contact(request: ContactRequest) -> None:
    # No mail transport is configured; submissions only go to the log.
    logger.info(
        "Contact form submission from %s <%s>: %s",
        request.name,
        request.email,
        request.subject,
    )
    logger.debug("Contact message body: %s", request.message)
