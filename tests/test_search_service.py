"""
Tests for SearchService.
"""

import pytest

from statewalk.config import AnnealingSettings, RunConfig, SearchSettings
from statewalk.core.errors import ConfigError
from statewalk.models.path_swap import Path
from statewalk.services.search_service import SearchService, to_plain


@pytest.fixture
def service() -> SearchService:
    return SearchService()


class TestEnumerate:
    """Tests for enumeration through the service."""

    def test_all_states(self, service):
        result = service.enumerate("zero_one", {"size": 3})

        assert result.yielded == 8
        assert result.states[0] == [True, True, True]
        assert result.rendered == ["111", "110", "101", "100", "011", "010", "001", "000"]
        assert result.visited == 15
        assert result.applied == result.rolled_back == 14
        assert result.max_depth == 3
        assert not result.truncated

    def test_limit(self, service):
        result = service.enumerate("zero_one", {"size": 3}, SearchSettings(limit=3))

        assert result.yielded == 3
        assert result.truncated

    def test_keep(self, service):
        result = service.enumerate("queens", {"size": 6}, keep=1)

        assert result.yielded == 4
        assert result.states == [[1, 3, 5, 0, 2, 4]]

    def test_max_depth(self, service):
        result = service.enumerate("zero_one", {"size": 3}, SearchSettings(max_depth=2))

        assert result.yielded == 0
        assert result.pruned == 4

    def test_max_nodes(self, service):
        result = service.enumerate("zero_one", {"size": 3}, SearchSettings(max_nodes=3))

        assert result.rendered == ["111", "110"]

    def test_check_inverse(self, service):
        result = service.enumerate("queens", {"size": 5}, SearchSettings(check_inverse=True))

        assert result.yielded == 10

    def test_run_config(self, service):
        result = service.run_config(RunConfig(model="queens", params={"size": 6}, search=SearchSettings(limit=2)))

        assert result.yielded == 2
        assert result.params == {"size": 6}

    def test_stats(self, service):
        stats = service.enumerate("zero_one", {"size": 1}).stats()

        assert stats == {
            "yielded": 2,
            "pruned": 0,
            "visited": 3,
            "applied": 2,
            "rolled_back": 2,
            "max_depth": 1,
            "truncated": False,
        }


class TestErrors:
    """Tests for configuration errors."""

    def test_unknown_model(self, service):
        with pytest.raises(ConfigError, match="Unknown: nope"):
            service.enumerate("nope")

    def test_invalid_params(self, service):
        with pytest.raises(ConfigError, match="Invalid parameters for queens: size"):
            service.enumerate("queens", {"size": 0})

    def test_enumerate_without_terminal_states(self, service):
        with pytest.raises(ConfigError, match="Model path_swap has no terminal states"):
            service.enumerate("path_swap")

    def test_anneal_unsupported(self, service):
        with pytest.raises(ConfigError, match="does not support annealing"):
            service.anneal("zero_one")


class TestAnneal:
    """Tests for annealing through the service."""

    def test_path_swap(self, service):
        run = service.anneal("path_swap", {"seed": 7}, AnnealingSettings(seed=7))

        assert run.result.best_weight == -4
        assert run.best_state == {"order": [0, 2, 3, 1, 4], "weight": -4}
        assert run.rendered_best == "0 -> 2 -> 3 -> 1 -> 4 (weight -4)"
        assert run.fluctuation is None

    def test_fluctuation(self, service):
        run = service.anneal("path_swap", {"seed": 1}, AnnealingSettings(seed=1, fluctuation_steps=10))

        assert run.fluctuation is not None
        assert run.fluctuation >= 0


class TestToPlain:
    """Tests for state export conversion."""

    def test_dataclass(self):
        assert to_plain(Path([0, 1], 2)) == {"order": [0, 1], "weight": 2}

    def test_list_is_copied(self):
        state = [1, 2]
        plain = to_plain(state)
        state.append(3)

        assert plain == [1, 2]
