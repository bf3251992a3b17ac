# Field limits
MAX_TASK_TITLE_LENGTH = 200
MAX_TASK_DESCRIPTION_LENGTH = 2000
MAX_LABEL_NAME_LENGTH = 50
MAX_COMMENT_LENGTH = 5000
MAX_MESSAGE_LENGTH = 10000
MAX_THREAD_TITLE_LENGTH = 200

# Pagination
DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 100

# Activity log / dashboard
DEFAULT_RECENT_ACTIVITIES = 20
MAX_RECENT_ACTIVITIES = MAX_PAGE_SIZE
RECENT_TASKS_LIMIT = 10

DEFAULT_LABEL_COLORS = [
    "#ef4444",  # red
    "#f97316",  # orange
    "#f59e0b",  # amber
    "#eab308",  # yellow
    "#84cc16",  # lime
    "#22c55e",  # green
    "#10b981",  # emerald
    "#14b8a6",  # teal
    "#06b6d4",  # cyan
    "#0ea5e9",  # sky
    "#3b82f6",  # blue
    "#6366f1",  # indigo
    "#8b5cf6",  # violet
    "#a855f7",  # purple
    "#d946ef",  # fuchsia
    "#ec4899",  # pink
    "#f43f5e",  # rose
]
