"""Constants for the registration service."""

SESSIONS_ENDPOINT = "/sessions"
REGISTER_ENDPOINT = "/register"
STATUS_ENDPOINT = "/status"

ADMIN_LOGIN_ENDPOINT = "/admin/login"
ADMIN_LOGOUT_ENDPOINT = "/admin/logout"
ADMIN_CHECK_ENDPOINT = "/admin/check"
ADMIN_TOGGLE_ENDPOINT = "/admin/toggle"
ADMIN_REGISTRATIONS_ENDPOINT = "/admin/registrations"
ADMIN_EXPORT_ENDPOINT = "/admin/registrations/export"

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

SUBMISSIONS_DISABLED_MESSAGE = "Registrácia je momentálne vypnutá"
SESSION_FULL_MESSAGE = "Termín je už plne obsadený"
SESSION_NOT_FOUND_MESSAGE = "Termín neexistuje"
INVALID_PASSWORD_MESSAGE = "Nesprávne heslo"

STATUS_MESSAGES = {
    412: SUBMISSIONS_DISABLED_MESSAGE,
    409: SESSION_FULL_MESSAGE,
    404: SESSION_NOT_FOUND_MESSAGE,
}

LOGIN_STATUS_MESSAGES = {
    401: INVALID_PASSWORD_MESSAGE,
}
