from fakedata.config.schema import deep_merge_dicts


def test_nested_sections_merge() -> None:
    defaults = {
        "generation": {"formats": "pdf", "output_dir": ".", "theme": None},
        "manifest": {"shared_ids": False},
    }
    override = {"generation": {"formats": "xlsx:2,odp"}}
    merged = deep_merge_dicts(defaults, override)
    assert merged == {
        "generation": {"formats": "xlsx:2,odp", "output_dir": ".", "theme": None},
        "manifest": {"shared_ids": False},
    }
    assert defaults["generation"]["formats"] == "pdf"


def test_non_mapping_replaces_section() -> None:
    merged = deep_merge_dicts({"content": {"seed": 1}, "tags": [1, 2]}, {"content": None, "tags": [3]})
    assert merged == {"content": None, "tags": [3]}
