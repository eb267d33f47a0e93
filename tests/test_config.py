import importlib


def test_bool_from_env_true_false(monkeypatch):
    from typeforge import config as cfg
    # default false
    assert cfg._bool_from_env("NON_EXISTENT_FLAG", default=False) is False
    assert cfg._bool_from_env("NON_EXISTENT_FLAG", default=True) is True

    monkeypatch.setenv("FLAG_TRUE", "true")
    monkeypatch.setenv("FLAG_YES", "Yes")
    monkeypatch.setenv("FLAG_ONE", "1")
    monkeypatch.setenv("FLAG_ON", "on")

    assert cfg._bool_from_env("FLAG_TRUE", default=False) is True
    assert cfg._bool_from_env("FLAG_YES", default=False) is True
    assert cfg._bool_from_env("FLAG_ONE", default=False) is True
    assert cfg._bool_from_env("FLAG_ON", default=False) is True

    monkeypatch.setenv("FLAG_FALSE", "false")
    assert cfg._bool_from_env("FLAG_FALSE", default=True) is False


def test_int_from_env(monkeypatch):
    from typeforge import config as cfg

    monkeypatch.delenv("SOME_SEED", raising=False)
    assert cfg._int_from_env("SOME_SEED") is None

    monkeypatch.setenv("SOME_SEED", " 42 ")
    assert cfg._int_from_env("SOME_SEED") == 42

    monkeypatch.setenv("SOME_SEED", "not-a-number")
    assert cfg._int_from_env("SOME_SEED") is None


def test_config_flags_defaults(monkeypatch):
    # Clear env vars and reload module
    for key in ["USE_LLM_BACKSTORY", "LLM_MODEL_NAME", "OPENAI_API_KEY"]:
        monkeypatch.delenv(key, raising=False)

    import typeforge.config as cfg
    importlib.reload(cfg)

    assert cfg.USE_LLM_BACKSTORY is False
    assert isinstance(cfg.LLM_MODEL_NAME, str) and cfg.LLM_MODEL_NAME
    assert cfg.OPENAI_API_KEY is None


def test_config_flags_enabled(monkeypatch):
    monkeypatch.setenv("USE_LLM_BACKSTORY", "true")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("LLM_MODEL_NAME", "gpt-4.1-mini")

    import typeforge.config as cfg
    importlib.reload(cfg)

    assert cfg.USE_LLM_BACKSTORY is True
    assert cfg.OPENAI_API_KEY == "sk-test"
    assert cfg.LLM_MODEL_NAME == "gpt-4.1-mini"


def test_get_settings_reads_current_env(monkeypatch):
    from typeforge.config import get_settings

    for key in ["LOG_LEVEL", "QUIZ_MODE", "NAME_SEED", "USE_LLM_BACKSTORY"]:
        monkeypatch.delenv(key, raising=False)
    settings = get_settings()
    assert settings.log_level == "INFO"
    assert settings.quiz_mode == "quick"
    assert settings.name_seed is None
    assert settings.use_llm_backstory is False

    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("QUIZ_MODE", " Deep ")
    monkeypatch.setenv("NAME_SEED", "7")
    monkeypatch.setenv("USE_LLM_BACKSTORY", "1")
    settings = get_settings()
    assert settings.log_level == "DEBUG"
    assert settings.quiz_mode == "deep"
    assert settings.name_seed == 7
    assert settings.use_llm_backstory is True
