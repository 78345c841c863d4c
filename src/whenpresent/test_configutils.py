import os

import pytest

import whenpresent.configutils
import whenpresent.unittesthelper as uth


class TestExtractValue:
    def test_extract_value_from_argv(self):
        argv = ["/usr/bin/when-present", "--style=indent", "-v"]

        value = whenpresent.configutils.extract_value_from_argv("style", argv)
        assert value == "indent"

        value = whenpresent.configutils.extract_value_from_argv("config", argv)
        assert value is None

    def test_extract_value_separate_argument(self):
        argv = ["--file", "a.c", "--config", "mine.conf"]
        assert whenpresent.configutils.extract_value_from_argv("config", argv) == "mine.conf"

    def test_extract_value_default(self):
        assert whenpresent.configutils.extract_value_from_argv("style", [], default="text") == "text"

    def test_extractconfig(self):
        assert whenpresent.configutils.extractconfig(["-c", "a.conf"]) == "a.conf"
        assert whenpresent.configutils.extractconfig(["--config=b.conf"]) == "b.conf"
        assert whenpresent.configutils.extractconfig(["--lines", "3"]) is None


class TestConfigFiles:
    def setup_method(self):
        uth.reset()

    def teardown_method(self):
        uth.reset()

    def test_default_config_directories_order(self):
        with uth.TempDirContext():
            dirs = whenpresent.configutils.default_config_directories(
                user_config_dir="/user", system_config_dir="/system"
            )
            assert dirs == ["/system", "/user", os.getcwd()]

    def test_default_configs_only_existing(self):
        with uth.TempDirContext():
            os.mkdir("user")
            uth.create_temp_config("user", "when-present.conf")
            uth.create_temp_config(os.getcwd(), "when-present.conf")
            configs = whenpresent.configutils.defaultconfigs(
                user_config_dir=os.path.join(os.getcwd(), "user"),
                system_config_dir="/nonexistent/system",
            )
            assert configs == [
                os.path.join(os.getcwd(), "user", "when-present.conf"),
                os.path.join(os.getcwd(), "when-present.conf"),
            ]

    def test_config_files_appends_explicit_config(self):
        with uth.TempDirContext():
            cfg = uth.create_temp_config(os.getcwd(), "mine.conf")
            configs = whenpresent.configutils.config_files(
                argv=["--config", cfg],
                user_config_dir="/nonexistent/user",
                system_config_dir="/nonexistent/system",
            )
            assert configs == [cfg]

    def test_config_files_missing_explicit_config(self):
        with uth.TempDirContext():
            with pytest.raises(SystemExit):
                whenpresent.configutils.config_files(
                    argv=["-c", "missing.conf"],
                    user_config_dir="/nonexistent/user",
                    system_config_dir="/nonexistent/system",
                )
