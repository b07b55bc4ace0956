"""Unit tests for the number resolution trace."""
from digify.stages import Stage, StageResult, Trace


class TestStageResult:
    """Test cases for chained stage results."""

    def test_chain(self):
        first = StageResult(Stage.INPUT, new="'two'")
        second = StageResult(Stage.NEW_NUMBER, new="[2]", prev=first, ctx="two", position=0)
        assert second.old == "'two'"
        assert second.content == "[2]"
        assert second.history == [first, second]
        assert second[-2] is first
        assert second.precursors() == [first]

    def test_content_falls_back_to_previous(self):
        first = StageResult(Stage.INPUT, new="'x'")
        assert StageResult(Stage.FINALIZE, prev=first).content == "'x'"

    def test_explanation(self):
        first = StageResult(Stage.INPUT, new="'two'")
        second = StageResult(Stage.NEW_NUMBER, new="[2]", prev=first, ctx="two", position=0)
        assert second.get_explanation() == "@0 new number('two'): 'two' -> [2]"
        assert second.get_explanation(log_context=False) == "@0 new number: 'two' -> [2]"

    def test_precursor_limit(self):
        node = StageResult(Stage.INPUT, new="a")
        for i in range(5):
            node = StageResult(Stage.ADD, new=str(i), prev=node)
        assert len(node.precursors(max_levels=2)) == 2


class TestTrace:
    """Test cases for Trace and the number resolver's use of it."""

    def test_disabled_trace_records_nothing(self):
        tr = Trace("two", enabled=False)
        tr.record(Stage.ADD, 2)
        assert tr.last is None

    def test_record(self):
        tr = Trace("two")
        tr.record(Stage.NEW_NUMBER, "[2]", "two", 0)
        assert tr.last.stage == Stage.NEW_NUMBER
        assert tr.last.prev.stage == Stage.INPUT

    def test_resolver_trace(self, numbers):
        trace = numbers.parse("twelve hundred fifty", trace=True).trace
        assert [r.stage for r in trace] == ["input", "new number", "multiply", "new segment", "finalize"]
        assert trace.content == "1250"
        assert "multiply('hundred')" in trace.explain()

    def test_remerge_and_flip_are_traced(self, numbers):
        trace = numbers.parse("eine million sechs hundertdreiundfünfzigtausend eins", "de-DE", trace=True).trace
        stages = [r.stage for r in trace]
        assert Stage.FLIP in stages
        assert Stage.REMERGE in stages

    def test_modifier_is_traced(self, numbers):
        trace = numbers.parse("three quarter", trace=True).trace
        assert Stage.MODIFY in [r.stage for r in trace]
        assert trace.content == "0.75"

    def test_no_trace_by_default(self, numbers):
        assert numbers.parse("twelve hundred fifty").trace is None
