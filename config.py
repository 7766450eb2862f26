# config.py
import os

# --- Операции ---
OP_LIST = "list"
OP_ADD = "add"
OP_FIND_BY_ID = "findById"
OP_REMOVE = "remove"

OPERATIONS = (OP_LIST, OP_ADD, OP_FIND_BY_ID, OP_REMOVE)

# --- Флаги CLI ---
FLAG_OPERATION = "operation"
FLAG_FILE_NAME = "fileName"
FLAG_ITEM = "item"
FLAG_ID = "id"

# --- Сообщения ---
MISSING_FLAG_MSG = "-{flag} flag has to be specified"
UNKNOWN_OPERATION_MSG = "Operation {operation} not allowed!"
ALREADY_EXISTS_MSG = "Item with id {id} already exists"
NOT_FOUND_MSG = "Item with id {id} not found"

# --- Файл ---
FILE_ENCODING = "utf-8"
TMP_SUFFIX = ".tmp"
# компактный JSON без пробелов
JSON_SEPARATORS = (",", ":")

# --------------- logger.py ---------------
# debug | info | success | warn | error
LOG_LEVEL = os.getenv("USERS_LOG_LEVEL", "warn")
