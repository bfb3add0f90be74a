import os

from obvtools.userdirs import UserDir, create_dirs, get_user_dir


def test_config_dir_from_xdg(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    result = get_user_dir(UserDir.CONFIG, "App")
    assert result == f"{tmp_path}/App/"
    assert os.path.isdir(result)


def test_data_dir_from_xdg(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    result = get_user_dir(UserDir.DATA, "App")
    assert result == f"{tmp_path}/App/"
    assert os.path.isdir(result)


def test_config_dir_falls_back_to_home(tmp_path, monkeypatch):
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    result = get_user_dir(UserDir.CONFIG, "App")
    assert result == f"{tmp_path}/.config/App/"
    assert (tmp_path / ".config" / "App").is_dir()


def test_data_dir_falls_back_to_home(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_DATA_HOME", "")
    monkeypatch.setenv("HOME", str(tmp_path))
    result = get_user_dir(UserDir.DATA, "App")
    assert result == f"{tmp_path}/.local/share/App/"
    assert (tmp_path / ".local" / "share" / "App").is_dir()


def test_no_environment_gives_current_dir(monkeypatch):
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("HOME", raising=False)
    assert get_user_dir(UserDir.CONFIG, "App") == "./"


def test_blocked_directory_gives_current_dir(tmp_path, monkeypatch):
    (tmp_path / "App").write_text("not a directory")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_user_dir(UserDir.CONFIG, "App") == "./"


def test_create_dirs_nested(tmp_path):
    target = f"{tmp_path}/a/b/c/"
    assert create_dirs(target) is True
    assert os.path.isdir(target)


def test_create_dirs_ignores_last_component_without_slash(tmp_path):
    assert create_dirs(f"{tmp_path}/a/leaf") is True
    assert (tmp_path / "a").is_dir()
    assert not (tmp_path / "a" / "leaf").exists()


def test_create_dirs_fails_on_file(tmp_path):
    (tmp_path / "file").write_text("x")
    assert create_dirs(f"{tmp_path}/file/sub/") is False