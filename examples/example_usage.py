"""Example: drive an attendance session without Flask.

Controllers are a thin layer; the session store does the work.
"""

import importlib
import sys

from staff_attendance.common.datetime_utils import today_local
from staff_attendance.container import build_container
from staff_attendance.core.exceptions import NoDataError
from staff_attendance.settings import get_settings_module


def main(day: str) -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    _, store = container.sessions.get(None)
    store.reload()
    store.select_date(day)
    print(store.summary().long())
    try:
        for row in store.report("monthly").rows:
            print(" | ".join(row))
    except NoDataError as e:
        print(e)


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else today_local().isoformat())
