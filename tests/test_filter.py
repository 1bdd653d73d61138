from filter import FilterConfig, SolutionFilter, apply_solution_filters, load_filter_config


def test_global_config_blacklist():
    config = load_filter_config()
    assert "xylyl" in config.blacklist


def test_missing_config_is_empty():
    assert load_filter_config("does-not-exist") == FilterConfig()


def test_profanity_removed():
    assert apply_solution_filters(["apple", "bitch", "crate"]) == ["apple", "crate"]


def test_config_rules():
    config = FilterConfig(prefixes=("un",), suffixes=("ed",), blacklist=("crate",))
    words = ["crate", "baked", "under", "apple", "Apple"]
    assert SolutionFilter(config).apply(words) == ["apple"]


def test_disabled_only_deduplicates():
    assert apply_solution_filters(["crate", "Crate", "bitch"], enable_filters=False) == [
        "bitch",
        "crate",
    ]


def test_global_config_has_no_affix_rules():
    config = load_filter_config()
    assert config.prefixes == ()
    assert config.suffixes == ()
    assert config.blacklist == ("xylyl", "zooid")
