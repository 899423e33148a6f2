from django.conf import settings

from shamsi.constants import DEFAULT_DATE_FORMAT, DEFAULT_DATETIME_FORMAT

# Overridable from Django settings as SHAMSI_<NAME>
DEFAULTS = {
    'DATE_FORMAT': DEFAULT_DATE_FORMAT,
    'DATETIME_FORMAT': DEFAULT_DATETIME_FORMAT,
    'USE_PERSIAN_DIGITS': False,
}


def get_setting(name):
    if name not in DEFAULTS:
        raise KeyError(f"Unknown shamsi setting {name!r}")
    if not settings.configured:
        return DEFAULTS[name]
    return getattr(settings, 'SHAMSI_' + name, DEFAULTS[name])
