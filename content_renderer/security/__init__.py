from .account_names import validate_account_name
from .link_sanitizer import LinkSanitizer
from .phishing import PhishingList, default_phishing_list
from .security_checker import SecurityChecker

__all__ = [
    "LinkSanitizer",
    "PhishingList",
    "SecurityChecker",
    "default_phishing_list",
    "validate_account_name",
]
