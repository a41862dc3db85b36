"""Tests for the guide presenter and its view state lifecycle."""

import asyncio

import httpx
import pytest

from guideview.config.constants import FETCH_ERROR_MESSAGE
from guideview.models.view_state import Content, DocumentRequest, Error, Loading
from guideview.services.guide_fetcher import GuideFetcher
from guideview.ui.guide_presenter import GuidePresenter

from conftest import make_transport


async def _settle() -> None:
    for _ in range(5):
        await asyncio.sleep(0)


@pytest.fixture
def recorded_states():
    return []


@pytest.fixture
def make_presenter(recorded_states):
    def _make(fetcher):
        async def record(state):
            recorded_states.append(state)

        return GuidePresenter(fetcher, on_state_update=record, code_theme="monokai")

    return _make


class TestDocumentRequest:
    def test_empty_identifier_rejected(self):
        with pytest.raises(ValueError):
            DocumentRequest("", 1)

    def test_requests_with_same_identifier_are_distinct(self):
        assert DocumentRequest("a", 1) != DocumentRequest("a", 2)


class TestPresenterLifecycle:
    def test_initial_state_is_loading(self, make_presenter, make_fetcher):
        presenter = make_presenter(make_fetcher({}))
        assert presenter.state == Loading()
        assert presenter.active_request is None

    @pytest.mark.asyncio
    async def test_success_goes_loading_then_content(self, make_presenter, make_fetcher, recorded_states):
        presenter = make_presenter(make_fetcher({"textguide": "# Hello\nWorld"}))

        await presenter.request("textguide")

        assert isinstance(recorded_states[0], Loading)
        assert isinstance(presenter.state, Content)
        assert presenter.state.identifier == "textguide"
        assert [(e.kind, e.plain_text) for e in presenter.state.elements] == [
            ("heading", "Hello"),
            ("paragraph", "World"),
        ]
        assert len(recorded_states) == 2

    @pytest.mark.asyncio
    async def test_missing_guide_goes_to_error(self, make_presenter, make_fetcher, recorded_states):
        presenter = make_presenter(make_fetcher({}))

        await presenter.request("missing")

        assert presenter.state == Error("Failed to load guide")
        assert FETCH_ERROR_MESSAGE == "Failed to load guide"
        assert recorded_states == [Loading(), Error("Failed to load guide")]

    @pytest.mark.asyncio
    async def test_server_error_goes_to_error(self, make_presenter, make_fetcher):
        presenter = make_presenter(make_fetcher({"x": "unused"}, status_overrides={"x": 502}))
        await presenter.request("x")
        assert isinstance(presenter.state, Error)

    @pytest.mark.asyncio
    async def test_malformed_origin_goes_to_error(self, make_presenter):
        async with httpx.AsyncClient(transport=make_transport({"a": "# A"})) as client:
            presenter = make_presenter(GuideFetcher("http://[::1", client=client))
            await presenter.request("a")

        assert presenter.state == Error("Failed to load guide")

    @pytest.mark.asyncio
    async def test_content_text_matches_fetched_body(self, make_presenter, make_fetcher):
        body = "Intro paragraph\n\n```python\nprint('hi')\n```\n"
        presenter = make_presenter(make_fetcher({"g": body}))

        await presenter.request("g")

        paragraph, code = presenter.state.elements
        assert paragraph.plain_text == "Intro paragraph"
        assert code.plain_text == "print('hi')"

    @pytest.mark.asyncio
    async def test_same_identifier_is_not_refetched(self, make_presenter, controlled_fetcher):
        presenter = make_presenter(controlled_fetcher)
        controlled_fetcher.resolve("a", "# A")
        await presenter.request("a")

        await presenter.request("a")

        assert controlled_fetcher.calls == ["a"]

    @pytest.mark.asyncio
    async def test_new_identifier_restarts_at_loading(self, make_presenter, make_fetcher, recorded_states):
        presenter = make_presenter(make_fetcher({"a": "# A"}))
        await presenter.request("missing")
        assert isinstance(presenter.state, Error)

        await presenter.request("a")

        assert recorded_states[-2] == Loading()
        assert isinstance(presenter.state, Content)

    @pytest.mark.asyncio
    async def test_refresh_refetches_active_guide(self, make_presenter, controlled_fetcher, recorded_states):
        presenter = make_presenter(controlled_fetcher)
        controlled_fetcher.resolve("a", "old")
        await presenter.request("a")

        controlled_fetcher.resolve("a", "new")
        await presenter.refresh()

        assert controlled_fetcher.calls == ["a", "a"]
        assert presenter.state.elements[0].plain_text == "new"
        assert recorded_states[-2] == Loading()

    @pytest.mark.asyncio
    async def test_refresh_without_request_does_nothing(self, make_presenter, controlled_fetcher):
        presenter = make_presenter(controlled_fetcher)
        await presenter.refresh()
        assert controlled_fetcher.calls == []

    @pytest.mark.asyncio
    async def test_empty_identifier_raises_without_state_change(self, make_presenter, controlled_fetcher):
        presenter = make_presenter(controlled_fetcher)
        with pytest.raises(ValueError):
            await presenter.request("")
        assert presenter.active_request is None
        assert controlled_fetcher.calls == []


class TestLatestRequestWins:
    @pytest.mark.asyncio
    async def test_slow_earlier_success_is_discarded(self, make_presenter, controlled_fetcher, recorded_states):
        presenter = make_presenter(controlled_fetcher)

        task_a = asyncio.create_task(presenter.request("a"))
        await _settle()
        task_b = asyncio.create_task(presenter.request("b"))
        await _settle()

        controlled_fetcher.resolve("b", "# B")
        await task_b
        controlled_fetcher.resolve("a", "# A")
        await task_a

        assert isinstance(presenter.state, Content)
        assert presenter.state.identifier == "b"
        assert presenter.state.elements[0].plain_text == "B"
        assert recorded_states == [Loading(), Loading(), presenter.state]

    @pytest.mark.asyncio
    async def test_slow_earlier_failure_is_discarded(self, make_presenter, controlled_fetcher):
        presenter = make_presenter(controlled_fetcher)

        task_a = asyncio.create_task(presenter.request("a"))
        await _settle()
        task_b = asyncio.create_task(presenter.request("b"))
        await _settle()

        controlled_fetcher.resolve("b", "# B")
        await task_b
        controlled_fetcher.fail("a")
        await task_a

        assert isinstance(presenter.state, Content)
        assert presenter.state.identifier == "b"

    @pytest.mark.asyncio
    async def test_earlier_result_arriving_first_is_discarded(self, make_presenter, controlled_fetcher):
        presenter = make_presenter(controlled_fetcher)

        task_a = asyncio.create_task(presenter.request("a"))
        await _settle()
        task_b = asyncio.create_task(presenter.request("b"))
        await _settle()

        controlled_fetcher.resolve("a", "# A")
        await task_a
        assert presenter.state == Loading()

        controlled_fetcher.fail("b")
        await task_b
        assert presenter.state == Error(FETCH_ERROR_MESSAGE)

    @pytest.mark.asyncio
    async def test_switching_back_discards_first_request(self, make_presenter, controlled_fetcher):
        presenter = make_presenter(controlled_fetcher)

        first_a = asyncio.create_task(presenter.request("a"))
        await _settle()
        b = asyncio.create_task(presenter.request("b"))
        await _settle()
        second_a = asyncio.create_task(presenter.request("a"))
        await _settle()

        assert presenter.active_request.identifier == "a"
        assert presenter.active_request.seq == 3

        controlled_fetcher.resolve("b", "# B")
        controlled_fetcher.resolve("a", "# A")
        await asyncio.gather(first_a, b, second_a)

        assert presenter.state.identifier == "a"
