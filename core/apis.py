# =============================================================================
# core/apis.py  -  Upstream base URLs
# =============================================================================
# One constant per UK Parliament public REST API.  Tool modules append the
# endpoint path to these.  The two votes APIs are only published over plain
# http and redirect from there, which is why the fetcher follows redirects.
# =============================================================================

MEMBERS_API = "https://members-api.parliament.uk/api"
BILLS_API = "https://bills-api.parliament.uk/api/v1"
COMMITTEES_API = "https://committees-api.parliament.uk/api"
COMMONS_VOTES_API = "http://commonsvotes-api.parliament.uk/data"
LORDS_VOTES_API = "http://lordsvotes-api.parliament.uk/data"
ERSKINE_MAY_API = "https://erskinemay-api.parliament.uk/api"
HANSARD_API = "https://hansard-api.parliament.uk"
INTERESTS_API = "https://interests-api.parliament.uk/api/v1"
NOW_API = "https://now-api.parliament.uk/api"
ORAL_QUESTIONS_API = "https://oralquestionsandmotions-api.parliament.uk"
STATUTORY_INSTRUMENTS_API = "https://statutoryinstruments-api.parliament.uk/api/v2"
TREATIES_API = "https://treaties-api.parliament.uk/api"
WHATS_ON_API = "https://whatson-api.parliament.uk/calendar"
