"""Tests for the skill taxonomy and its JSON overrides."""

import json

import pytest
from pydantic import ValidationError

from models.schemas.skill_match import SkillCategory
from services.taxonomy import DEFAULT_CATEGORIES, SkillTaxonomy, get_taxonomy, load_taxonomy


class TestDefaults:
    def test_all_six_categories_present(self, taxonomy):
        assert set(taxonomy.categories) == set(SkillCategory)

    def test_tokens_are_lowercase(self, taxonomy):
        assert all(token == token.lower() for token in taxonomy.all_tokens())

    def test_kotlin_is_backend_and_mobile(self, taxonomy):
        assert taxonomy.categories_containing("Kotlin") == {
            SkillCategory.BACKEND,
            SkillCategory.MOBILE,
        }

    def test_unknown_token_has_no_category(self, taxonomy):
        assert taxonomy.categories_containing("cobol") == set()

    def test_is_immutable(self, taxonomy):
        with pytest.raises(ValidationError):
            taxonomy.critical_skills = ()

    @pytest.mark.parametrize("table", ["categories", "synonyms", "alternatives", "location_aliases"])
    def test_tables_are_read_only(self, taxonomy, table):
        mapping = getattr(taxonomy, table)
        key = next(iter(mapping))
        with pytest.raises(TypeError):
            mapping[key] = ("tampered",)
        with pytest.raises(TypeError):
            mapping["new-key"] = ()

    def test_shared_instance_is_read_only(self):
        shared = get_taxonomy()
        assert shared.categories[SkillCategory.FRONTEND] == DEFAULT_CATEGORIES[SkillCategory.FRONTEND]
        with pytest.raises(TypeError):
            shared.categories[SkillCategory.FRONTEND] = ()


class TestOverrides:
    def test_no_path_gives_defaults(self):
        assert load_taxonomy(None) == SkillTaxonomy()

    def test_json_file_replaces_named_tables(self, tmp_path):
        path = tmp_path / "taxonomy.json"
        path.write_text(json.dumps({
            "critical_skills": ["Rust", " Go "],
            "synonyms": {"Rust": ["rs"]},
        }))

        taxonomy = load_taxonomy(path)

        assert taxonomy.critical_skills == ("rust", "go")
        assert taxonomy.synonyms == {"rust": ("rs",)}
        # Tables missing from the file keep their defaults
        assert taxonomy.categories == SkillTaxonomy().categories
        assert taxonomy.important_skills == SkillTaxonomy().important_skills

    def test_categories_override(self, tmp_path):
        path = tmp_path / "taxonomy.json"
        path.write_text(json.dumps({"categories": {"frontend": ["Elm"]}}))

        taxonomy = load_taxonomy(path)

        assert taxonomy.categories == {SkillCategory.FRONTEND: ("elm",)}
        assert taxonomy.categories_containing("elm") == {SkillCategory.FRONTEND}

    def test_invalid_file_raises(self, tmp_path):
        path = tmp_path / "taxonomy.json"
        path.write_text(json.dumps({"categories": {"gardening": ["roses"]}}))
        with pytest.raises(ValidationError):
            load_taxonomy(path)
