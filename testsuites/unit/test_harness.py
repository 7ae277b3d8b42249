import pytest

from testsuites.ui_testing.framework import harness as h
from testsuites.ui_testing.framework.harness import (
    CaseAssertionError,
    HarnessError,
    StepContext,
    SuiteRegistrationError,
    SuiteRegistry,
    SuiteRunner,
    TestCase,
    TestSuite,
)
from testsuites.ui_testing.framework.dom_query import DomQuery
from testsuites.unit.fakes import FakePage


BASE_URL = "http://aem.test"
HOME = "/content/we-retail/us/en.html"


def make_context(page):
    return StepContext(page=page, dom=DomQuery(), base_url=BASE_URL)


class TestCaseBuilder:
    def test_modifiers_chain_and_keep_order(self):
        case = (
            TestCase("Load homepage")
            .navigate_to(HOME)
            .asserts.location(HOME, True)
            .asserts.count(".we-Teaser", 6)
            .wait(100)
        )

        assert isinstance(case, TestCase)
        assert [step.description for step in case.steps] == [
            f"Navigate to {HOME}",
            f"Assert location is {HOME}",
            "Assert .we-Teaser count is 6",
            "Wait 100 ms",
        ]

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            TestCase("")


class TestSuiteAndRegistry:
    def test_add_test_case_is_chainable_and_ordered(self):
        first, second = TestCase("first"), TestCase("second")
        suite = TestSuite("Suite", path="/apps/test/Suite").add_test_case(first).add_test_case(second)

        assert suite.test_cases == (first, second)
        assert list(suite) == [first, second]
        assert len(suite) == 2

    def test_rejects_non_case_objects(self):
        suite = TestSuite("Suite", path="/apps/test/Suite")
        with pytest.raises(HarnessError):
            suite.add_test_case("not a case")

    def test_register_writes_into_given_registry(self):
        reg = SuiteRegistry()
        suite = TestSuite("Suite", path="/apps/test/Suite", register=True, suite_registry=reg)

        assert "/apps/test/Suite" in reg
        assert reg.get("/apps/test/Suite") is suite
        assert len(reg) == 1
        assert "/apps/test/Suite" not in h.registry

    def test_unregistered_suite_stays_out_of_registry(self):
        reg = SuiteRegistry()
        TestSuite("Suite", path="/apps/test/Suite", suite_registry=reg)
        assert len(reg) == 0

    def test_duplicate_path_raises(self):
        reg = SuiteRegistry()
        TestSuite("One", path="/apps/test/Suite", register=True, suite_registry=reg)
        with pytest.raises(SuiteRegistrationError):
            TestSuite("Two", path="/apps/test/Suite", register=True, suite_registry=reg)

    def test_unknown_path_raises(self):
        with pytest.raises(HarnessError):
            SuiteRegistry().get("/apps/none")


class TestStepContext:
    def test_absolute_url(self):
        ctx = make_context(FakePage())
        assert ctx.absolute_url(HOME) == BASE_URL + HOME
        assert ctx.absolute_url("https://other.test/x.html") == "https://other.test/x.html"

    def test_current_path_strips_base_url(self):
        ctx = make_context(FakePage(url=BASE_URL + HOME))
        assert ctx.current_path() == HOME

    def test_current_path_on_other_host_keeps_path_and_query(self):
        ctx = make_context(FakePage(url="https://cdn.test/content/a.html?x=1"))
        assert ctx.current_path() == "/content/a.html?x=1"

    def test_current_path_needs_a_boundary_after_base_url(self):
        ctx = StepContext(page=FakePage(url="http://localhost:45020/x.html"), dom=DomQuery(),
                          base_url="http://localhost:4502")
        assert ctx.current_path() == "/x.html"

        ctx.page.url = "http://localhost:4502/x.html?wcmmode=disabled"
        assert ctx.current_path() == "/x.html?wcmmode=disabled"


@pytest.mark.asyncio
class TestCaseExecution:
    async def test_navigate_and_exact_location(self):
        page = FakePage()
        await TestCase("Load").navigate_to(HOME).asserts.location(HOME, True).run(make_context(page))
        assert page.visited == [BASE_URL + HOME]

    async def test_exact_location_mismatch_fails(self):
        page = FakePage(url=BASE_URL + HOME + "?wcmmode=disabled")
        with pytest.raises(CaseAssertionError):
            await TestCase("Load").asserts.location(HOME, True).run(make_context(page))

    async def test_partial_location(self):
        page = FakePage(url=BASE_URL + "/content/we-retail/us/en/products/men/shirts.html")
        await TestCase("Product").asserts.location("/products/", False).run(make_context(page))

    async def test_exists_and_absent(self):
        page = FakePage(counts={".we-Footer": 1})
        await (
            TestCase("Footer")
            .asserts.exists(".we-Footer")
            .asserts.exists(".we-Missing", False)
            .run(make_context(page))
        )
        with pytest.raises(CaseAssertionError):
            await TestCase("Footer").asserts.exists(".we-Missing").run(make_context(page))

    async def test_visible_wraps_timeout(self):
        page = FakePage()
        with pytest.raises(CaseAssertionError, match="visible"):
            await TestCase("Hero").asserts.visible(".we-HeroImage").run(make_context(page))

    async def test_count_mismatch_reports_found(self):
        page = FakePage(counts={".we-Article": 4})
        with pytest.raises(CaseAssertionError, match="found 4"):
            await TestCase("Articles").asserts.count(".we-Article", 6).run(make_context(page))

    async def test_is_true_predicate(self):
        async def always(ctx):
            return True

        async def never(ctx):
            return False

        ctx = make_context(FakePage())
        await TestCase("ok").asserts.is_true(always, "holds").run(ctx)
        with pytest.raises(CaseAssertionError, match="never holds"):
            await TestCase("ko").asserts.is_true(never, "never holds").run(ctx)

    async def test_click_uses_jquery_selector(self):
        page = FakePage(counts={".btn": 2})
        await TestCase("Click").click(".btn:eq(1)").run(make_context(page))
        assert page.clicked == [".btn:eq(1):first"]

    async def test_first_failing_step_stops_case(self):
        page = FakePage()
        case = TestCase("Stops").asserts.exists(".we-Missing").navigate_to(HOME)
        with pytest.raises(CaseAssertionError):
            await case.run(make_context(page))
        assert page.visited == []


@pytest.mark.asyncio
class TestSuiteRunner:
    async def test_runs_all_cases_in_order_and_continues_after_failure(self):
        page = FakePage(counts={".we-Teaser": 6})
        suite = (
            TestSuite("Homepage", path="/apps/test/Homepage")
            .add_test_case(TestCase("Load").navigate_to(HOME).asserts.location(HOME, True))
            .add_test_case(TestCase("Missing").asserts.count(".we-Missing", 1))
            .add_test_case(TestCase("Teasers").asserts.count(".we-Teaser", 6).asserts.visible(".we-Teaser"))
        )

        result = await SuiteRunner(page, BASE_URL).run(suite)

        assert [case.name for case in result.cases] == ["Load", "Missing", "Teasers"]
        assert [case.passed for case in result.cases] == [True, False, True]
        assert not result.passed
        assert result.failures[0].error.startswith("CaseAssertionError")
        assert page.screenshots == 1

        summary = result.summary()
        assert summary["total"] == 3
        assert summary["passed"] == 2
        assert summary["failed"] == 1
        assert summary["path"] == "/apps/test/Homepage"

    async def test_all_passing_suite(self):
        page = FakePage()
        suite = TestSuite("Load", path="/apps/test/Load").add_test_case(
            TestCase("Load").navigate_to(HOME).asserts.location(HOME, True)
        )

        result = await SuiteRunner(page, BASE_URL).run(suite)

        assert result.passed
        assert result.failures == []
        assert result.cases[0].url == BASE_URL + HOME

    async def test_failing_case_fails_its_report_step(self, monkeypatch):
        outcomes = {}

        class RecordingStep:
            def __init__(self, title):
                self.title = title

            def __enter__(self):
                return self

            def __exit__(self, exc_type, exc, tb):
                outcomes[self.title] = "failed" if exc_type else "passed"
                return False

        monkeypatch.setattr(h.allure, "step", RecordingStep)
        suite = (
            TestSuite("Homepage", path="/apps/test/Homepage")
            .add_test_case(TestCase("Load").navigate_to(HOME))
            .add_test_case(TestCase("Missing").asserts.count(".we-Missing", 1))
        )

        result = await SuiteRunner(FakePage(), BASE_URL).run(suite)

        assert [case.passed for case in result.cases] == [True, False]
        assert outcomes == {
            "Case: Load": "passed",
            f"Navigate to {HOME}": "passed",
            "Case: Missing": "failed",
            "Assert .we-Missing count is 1": "failed",
        }
