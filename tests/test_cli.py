"""Tests for the command-line entry points."""

import json
import os

import add_user
import main
import remove_user
from logger import Logger


class TestParseArgs:

    def test_single_dash_flags(self):
        args = main.parse_args(["-operation", "findById", "-fileName", "u.json", "-id", "5"])
        assert args == {"operation": "findById", "fileName": "u.json", "id": "5", "item": ""}

    def test_double_dash_flags(self):
        args = main.parse_args(["--operation", "add", "--fileName", "u.json", "--item", '{"id":"1"}'])
        assert args["item"] == '{"id":"1"}'

    def test_defaults_empty(self):
        assert main.parse_args([]) == {"operation": "", "fileName": "", "id": "", "item": ""}


class TestMain:

    def test_list_writes_file_to_stdout(self, capsysbinary, users_file):
        code = main.main(["-operation", "list", "-fileName", str(users_file)])
        assert code == 0
        assert capsysbinary.readouterr().out == users_file.read_bytes()

    def test_error_exits_nonzero_with_message(self, capsysbinary, users_file):
        code = main.main(["-operation", "wipe", "-fileName", str(users_file)])
        captured = capsysbinary.readouterr()
        assert code == 1
        assert captured.out == b""
        assert "Operation wipe not allowed!".encode() in captured.err

    def test_missing_file_for_list(self, capsysbinary, missing_file):
        assert main.main(["-operation", "list", "-fileName", str(missing_file)]) == 1
        assert capsysbinary.readouterr().err

    def test_non_utf8_id_echoed_as_raw_bytes(self, capsysbinary, users_file):
        before = users_file.read_bytes()
        code = main.main(["-operation", "remove", "-fileName", str(users_file), "-id", os.fsdecode(b"\xff")])
        assert code == 0
        assert capsysbinary.readouterr().out == b"Item with id \xff not found"
        assert users_file.read_bytes() == before

    def test_non_utf8_item_stored_as_replacement_char(self, capsysbinary, users_file):
        item = '{"id":"' + os.fsdecode(b"\xff") + '","email":"a@b.c","age":1}'
        assert main.main(["-operation", "add", "-fileName", str(users_file), "-item", item]) == 0

        users = json.loads(users_file.read_bytes().decode("utf-8"))
        assert users[-1]["id"] == "\ufffd"

    def test_full_cycle(self, capsysbinary, missing_file):
        path = str(missing_file)
        item = '{"id":"u1","email":"u1@example.com","age":20}'

        assert main.main(["-operation", "add", "-fileName", path, "-item", item]) == 0
        assert main.main(["-operation", "findById", "-fileName", path, "-id", "u1"]) == 0
        assert capsysbinary.readouterr().out == item.encode()

        assert main.main(["-operation", "remove", "-fileName", path, "-id", "u1"]) == 0
        assert main.main(["-operation", "list", "-fileName", path]) == 0
        assert capsysbinary.readouterr().out == b"[]"


class TestLogger:

    def test_debug_hidden_by_default(self, capsys, monkeypatch):
        monkeypatch.setattr(Logger, "level", "warn")
        Logger.debug("hidden")
        Logger.warn("shown")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "hidden" not in captured.err
        assert "shown" in captured.err

    def test_debug_level_shows_everything(self, capsys, monkeypatch):
        monkeypatch.setattr(Logger, "level", "debug")
        Logger.debug("details")
        assert "details" in capsys.readouterr().err


class TestScripts:

    def test_add_user_script(self, capsysbinary, users_file):
        code = add_user.main(["--fileName", str(users_file), "--id", "9", "--email", "n@x.y", "--age", "33"])
        assert code == 0
        users = json.loads(users_file.read_bytes())
        assert users[-1] == {"id": "9", "email": "n@x.y", "age": 33}

    def test_add_user_script_duplicate(self, capsysbinary, users_file):
        add_user.main(["--fileName", str(users_file), "--id", "1"])
        assert capsysbinary.readouterr().out == b"Item with id 1 already exists"

    def test_remove_user_script(self, capsysbinary, users_file):
        assert remove_user.main(["--fileName", str(users_file), "--id", "2"]) == 0
        assert [u["id"] for u in json.loads(users_file.read_bytes())] == ["1"]

    def test_remove_user_script_absent(self, capsysbinary, users_file):
        remove_user.main(["--fileName", str(users_file), "--id", "404"])
        assert capsysbinary.readouterr().out == b"Item with id 404 not found"
