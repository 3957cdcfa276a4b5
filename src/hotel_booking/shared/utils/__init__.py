from .http_response import api_response as api_response
from .http_response import error_response as error_response
from .identity import get_current_identity as get_current_identity
from .identity import sign_in_redirect as sign_in_redirect
from .validators import to_date as to_date
from .validators import to_decimal as to_decimal
