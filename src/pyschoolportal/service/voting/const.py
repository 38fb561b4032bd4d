"""Constants for the voting service."""

SESSION_ENDPOINT = "/session"
CANDIDATES_ENDPOINT = "/candidates"
VOTE_ENDPOINT = "/vote"
STATUS_ENDPOINT = "/status"
STATUS_WS_ENDPOINT = "/status/ws"

PRESENTER_LOGIN_ENDPOINT = "/presenter/login"
PRESENTER_LOGOUT_ENDPOINT = "/presenter/logout"
PRESENTER_CHECK_ENDPOINT = "/presenter/check"

ADMIN_STATUS_ENDPOINT = "/admin/status"
ADMIN_STATS_ENDPOINT = "/admin/stats"
ADMIN_RESULTS_ENDPOINT = "/admin/results"
ADMIN_LOTTERY_ENDPOINT = "/admin/lottery"

ACTION_START = "start"
ACTION_STOP = "stop"
STATUS_ACTIONS = (ACTION_START, ACTION_STOP)
