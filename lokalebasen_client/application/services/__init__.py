from .contact_service import ContactService
from .location_service import LocationService
from .navigator import Hop, HypermediaNavigator, find_by_external_key
from .normalizer import normalize, normalize_job
from .permissions import permit
from .response_validator import HTML_ERROR_MESSAGE, check_response
from .subscription_service import SubscriptionService

__all__ = [
    "ContactService",
    "LocationService",
    "Hop",
    "HypermediaNavigator",
    "find_by_external_key",
    "normalize",
    "normalize_job",
    "permit",
    "HTML_ERROR_MESSAGE",
    "check_response",
    "SubscriptionService",
]
