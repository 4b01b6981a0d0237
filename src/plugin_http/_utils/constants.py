# Verbs
GET = "GET"
POST = "POST"
PUT = "PUT"
DELETE = "DELETE"
HEAD = "HEAD"
OPTIONS = "OPTIONS"

# Media types
APPLICATION_JSON = "application/json"
APPLICATION_XML = "application/xml"
APPLICATION_X_WWW_FORM_URLENCODED = "application/x-www-form-urlencoded"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"

# Option keys applied as headers rather than query parameters
RESERVED_HEADER_OPTIONS = (HEADER_ACCEPT, HEADER_CONTENT_TYPE)

USER_AGENT = "PluginHttp/1.0"

DEFAULT_HTTP_TIMEOUT_SEC = 10

LOGGER_NAME = "plugin_http"
