# users_store.py
import json
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from config import FILE_ENCODING, JSON_SEPARATORS, TMP_SUFFIX
from logger import Logger

DEFAULT_USERS_PATH = "users.json"


class UsersError(Exception):
    """Базовая ошибка утилиты."""


class MissingArgumentError(UsersError, ValueError):
    pass


class UnknownOperationError(UsersError, ValueError):
    pass


class ItemParseError(UsersError, ValueError):
    pass


class StoreError(UsersError):
    pass


def _field(raw: Dict[str, Any], key: str, kind: type, default):
    if key not in raw or raw[key] is None:
        return default
    value = raw[key]
    # bool в JSON не число
    if isinstance(value, bool) or not isinstance(value, kind):
        raise ValueError(
            f"field {key!r} must be {kind.__name__}, got {type(value).__name__}"
        )
    if isinstance(value, str):
        return _replace_surrogates(value)
    return value


def _replace_surrogates(value: str) -> str:
    # одиночные суррогаты (\ud800 в JSON, не-UTF-8 байты из argv) → U+FFFD
    return value.encode("utf-16", "surrogatepass").decode("utf-16", "replace")


@dataclass
class User:
    id: str = ""
    email: str = ""
    age: int = 0

    @classmethod
    def from_dict(cls, raw: Any) -> "User":
        if not isinstance(raw, dict):
            raise ValueError(f"user must be a JSON object, got {type(raw).__name__}")
        return cls(
            id=_field(raw, "id", str, ""),
            email=_field(raw, "email", str, ""),
            age=_field(raw, "age", int, 0),
        )

    @classmethod
    def from_json(cls, text: str) -> "User":
        """
        Разбирает одну запись. Отсутствующие поля получают нулевые значения,
        лишние игнорируются.
        """
        try:
            return cls.from_dict(json.loads(text))
        except ValueError as e:
            raise ItemParseError(f"can't unmarshal json, error = {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "email": self.email, "age": self.age}

    def to_json(self) -> str:
        return dumps(self.to_dict())


def dumps(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, separators=JSON_SEPARATORS)


class UsersStore:
    """
    Список пользователей в одном JSON-файле.
    Файл читается целиком при каждом вызове и целиком перезаписывается.
    Блокировок нет.
    """

    def __init__(self, path: str = DEFAULT_USERS_PATH):
        self.path = path
        self.users: List[User] = []

    def load(self) -> List[User]:
        if not os.path.exists(self.path):
            Logger.debug(f"{self.path} не найден, создаём пустой файл")
            # создаём пустой файл, как и раньше
            open(self.path, "a", encoding=FILE_ENCODING).close()

        with open(self.path, "rb") as f:
            data = f.read()

        self.users = _decode_users(data)
        Logger.debug(f"Загружено {len(self.users)} записей из {self.path}")
        return self.users

    def save(self):
        tmp = self.path + TMP_SUFFIX
        data = dumps([u.to_dict() for u in self.users]).encode(FILE_ENCODING)
        try:
            with open(tmp, "wb") as f:
                f.write(data)
            os.replace(tmp, self.path)
        except BaseException:
            # .tmp рядом с файлом не оставляем
            if os.path.exists(tmp):
                os.remove(tmp)
            raise
        Logger.debug(f"Сохранено {len(self.users)} записей в {self.path}")

    def find(self, user_id: str) -> Optional[User]:
        for u in self.users:
            if u.id == user_id:
                return u
        return None

    def add(self, user: User) -> bool:
        """False если id уже занят; файл в этом случае не трогаем."""
        if self.find(user.id) is not None:
            return False
        self.users.append(user)
        self.save()
        return True

    def remove(self, user_id: str) -> bool:
        for i, u in enumerate(self.users):
            if u.id == user_id:
                del self.users[i]
                self.save()
                return True
        return False


def _decode_users(data: bytes) -> List[User]:
    if not data.strip():
        return []
    try:
        raw = json.loads(data.decode(FILE_ENCODING))
        if not isinstance(raw, list):
            raise ValueError(f"expected JSON array, got {type(raw).__name__}")
        return [User.from_dict(item) for item in raw]
    except ValueError as e:
        raise StoreError(f"can't get users array from json file, error = {e}") from e
