import re

import pytest

from domain_brainstormer.generators import (
    AffixGenerator, CompoundGenerator, DomainGenerator, GeneratorOptions, NoKeywordsError, GENERATOR_PRESETS
)

NAME_PATTERN = re.compile(r'[a-z0-9]+')
DESCRIPTION = "AI-powered task manager for teams"


class TestCompoundGenerator:
    def test_portmanteau_vowel_boundary_and_ratio(self):
        blends = CompoundGenerator().create_portmanteau("task", "manager")
        assert blends == ["tanager", "taser"]

    def test_portmanteau_overlap(self):
        assert "streambient" in CompoundGenerator().create_portmanteau("stream", "ambient")

    def test_blends_respect_length_bounds(self):
        gen = CompoundGenerator()
        for blend in gen.generate_portmanteaus(["powered", "task", "manager", "teams"]):
            assert 5 <= len(blend) <= 12

    def test_compounds_join_pairs_both_ways(self):
        compounds = CompoundGenerator().generate_compounds(["task", "teams"])
        assert "taskteams" in compounds
        assert "teamstask" in compounds
        assert "buildtask" in compounds
        assert "taskbuild" in compounds

    def test_tech_combos_skip_identical_terms(self):
        combos = CompoundGenerator().generate_tech_combos(["cloud", "task"])
        assert "cloudcloud" not in combos
        assert "taskcloud" in combos
        assert "cloudtask" in combos


class TestAffixGenerator:
    def test_affixes_respect_max_length(self):
        candidates = AffixGenerator().generate_with_affixes(["manager"])
        assert "getmanager" in candidates
        assert "managerhub" in candidates
        assert all(len(c) <= 12 for c in candidates)

    def test_drop_last_vowel(self):
        gen = AffixGenerator()
        assert gen.drop_last_vowel("manager") == "managr"
        assert gen.drop_last_vowel("task") is None

    def test_variations(self):
        assert AffixGenerator().generate_variations("task") == ["task", "taskify", "taskly"]


class TestDomainGenerator:
    @pytest.fixture
    def generator(self):
        return DomainGenerator()

    def test_suggestions_sorted_and_filtered(self, generator):
        suggestions = generator.generate(DESCRIPTION)

        assert 0 < len(suggestions) <= 20
        scores = [s.score for s in suggestions]
        assert scores == sorted(scores, reverse=True)
        assert all(s.score >= 55 for s in suggestions)

    def test_names_are_valid_labels(self, generator):
        for s in generator.generate(DESCRIPTION, GENERATOR_PRESETS['thorough']):
            assert NAME_PATTERN.fullmatch(s.name)
            assert 4 <= len(s.name) <= 15
            assert not s.name.isdigit()

    def test_overrides(self, generator):
        suggestions = generator.generate(DESCRIPTION, max_suggestions=3, min_score=80)
        assert len(suggestions) <= 3
        assert all(s.score >= 80 for s in suggestions)

    def test_unreachable_min_score_gives_empty_list(self, generator):
        assert generator.generate(DESCRIPTION, GeneratorOptions(min_score=101)) == []

    def test_deterministic(self, generator):
        first = [s.name for s in generator.generate(DESCRIPTION)]
        second = [s.name for s in generator.generate(DESCRIPTION)]
        assert first == second

    def test_stop_words_only_raises(self, generator):
        with pytest.raises(NoKeywordsError):
            generator.generate("the and or")

    def test_candidates_include_keyword_variations(self, generator):
        candidates = generator.generate_candidates(["task", "manager"])
        assert "task" in candidates
        assert "taskify" in candidates
        assert "managr" in candidates

    def test_generate_by_grade(self, generator):
        graded = generator.generate_by_grade(DESCRIPTION)

        assert graded.all
        assert all(s.scoring.grade.startswith('A') for s in graded.premium)
        assert all(s.scoring.grade.startswith('B') for s in graded.good)
        assert all(s.scoring.grade.startswith('C') for s in graded.acceptable)
        assert len(graded.premium) + len(graded.good) + len(graded.acceptable) <= len(graded.all)
