# operations.py
from typing import BinaryIO, Mapping, Optional

from config import (
    ALREADY_EXISTS_MSG,
    FILE_ENCODING,
    FLAG_FILE_NAME,
    FLAG_ID,
    FLAG_ITEM,
    FLAG_OPERATION,
    MISSING_FLAG_MSG,
    NOT_FOUND_MSG,
    OP_ADD,
    OP_FIND_BY_ID,
    OP_LIST,
    OP_REMOVE,
    UNKNOWN_OPERATION_MSG,
)
from logger import Logger
from users_store import (
    MissingArgumentError,
    UnknownOperationError,
    User,
    UsersStore,
)


def _require(args: Mapping[str, Optional[str]], flag: str) -> str:
    value = args.get(flag) or ""
    if not value:
        raise MissingArgumentError(MISSING_FLAG_MSG.format(flag=flag))
    return value


def _write(writer: BinaryIO, text: str):
    # не-UTF-8 байты из argv пишем как есть
    writer.write(text.encode(FILE_ENCODING, "surrogateescape"))


def perform(args: Mapping[str, Optional[str]], writer: BinaryIO):
    """
    Выполняет одну операцию над файлом пользователей.
    Порядок проверок: operation, fileName, затем параметр конкретной операции.
    """
    operation = _require(args, FLAG_OPERATION)
    file_name = _require(args, FLAG_FILE_NAME)

    Logger.info(f"{operation} → {file_name}")

    if operation == OP_LIST:
        return list_users(file_name, writer)
    if operation == OP_ADD:
        return add_user(_require(args, FLAG_ITEM), file_name, writer)
    if operation == OP_FIND_BY_ID:
        return find_user_by_id(_require(args, FLAG_ID), file_name, writer)
    if operation == OP_REMOVE:
        return remove_user(_require(args, FLAG_ID), file_name, writer)

    raise UnknownOperationError(UNKNOWN_OPERATION_MSG.format(operation=operation))


def list_users(file_name: str, writer: BinaryIO):
    # файл не создаём: отсутствие файла здесь ошибка
    with open(file_name, "rb") as f:
        data = f.read()
    writer.write(data)


def add_user(item: str, file_name: str, writer: BinaryIO):
    new_user = User.from_json(item)

    store = UsersStore(file_name)
    store.load()

    if not store.add(new_user):
        Logger.warn(f"id {new_user.id} уже есть в {file_name}")
        _write(writer, ALREADY_EXISTS_MSG.format(id=new_user.id))
        return

    Logger.success(f"Добавлен пользователь {new_user.id}")


def find_user_by_id(user_id: str, file_name: str, writer: BinaryIO):
    store = UsersStore(file_name)
    store.load()

    user = store.find(user_id)
    if user is None:
        return
    _write(writer, user.to_json())


def remove_user(user_id: str, file_name: str, writer: BinaryIO):
    store = UsersStore(file_name)
    store.load()

    if not store.remove(user_id):
        _write(writer, NOT_FOUND_MSG.format(id=user_id))
        return

    Logger.success(f"Удалён пользователь {user_id}")
