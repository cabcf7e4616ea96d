from docsummary.summarization.extractive import ExtractiveSummarizer


class TestExtractiveSummarizer:
    def test_short_note_is_returned_whole(self) -> None:
        text = "Buy milk. Call Alice. Finish report."
        assert ExtractiveSummarizer().summarize(text) == "Buy milk. Call Alice. Finish report."

    def test_empty_text(self) -> None:
        assert ExtractiveSummarizer().summarize("") == ""

    def test_text_without_sentences(self) -> None:
        assert ExtractiveSummarizer().summarize(" ... !!! ") == ""

    def test_text_without_terminator(self) -> None:
        assert ExtractiveSummarizer().summarize("just a phrase") == "just a phrase."

    def test_long_text_keeps_leading_third(self) -> None:
        sentences = [f"This is sentence number {i} of the report" for i in range(9)]
        text = ". ".join(sentences) + "."
        result = ExtractiveSummarizer().summarize(text)
        assert result == ". ".join(sentences[:3]) + "."

    def test_long_text_drops_short_fragments(self) -> None:
        text = "Ok. Fine. " + " ".join(
            f"The budget review covers item {i} in depth." for i in range(6)
        )
        result = ExtractiveSummarizer().summarize(text)
        assert result == (
            "The budget review covers item 0 in depth. "
            "The budget review covers item 1 in depth."
        )

    def test_keeps_short_fragments_when_nothing_else(self) -> None:
        text = "A. B. C. D. E. F. G."
        assert ExtractiveSummarizer().summarize(text) == "A. B. C."

    def test_caps_sentence_count(self) -> None:
        sentences = [f"Sentence {i} talks about the plan" for i in range(30)]
        result = ExtractiveSummarizer().summarize(". ".join(sentences) + ".")
        assert result == ". ".join(sentences[:5]) + "."

    def test_explicit_limit(self) -> None:
        text = "First sentence here. Second sentence here. Third one here. Fourth one here."
        result = ExtractiveSummarizer().summarize(text, max_sentences=3)
        assert result == "First sentence here. Second sentence here."

    def test_splits_on_all_terminators(self) -> None:
        result = ExtractiveSummarizer().summarize("Really?! Yes. Done")
        assert result == "Really. Yes. Done."

    def test_is_verbatim_sentence_subset(self, prose: str) -> None:
        result = ExtractiveSummarizer().summarize(prose)
        for sentence in result.rstrip(".").split(". "):
            assert sentence in prose


class TestLeadingSentences:
    def test_takes_first_count_sentences(self) -> None:
        words = ["one", "two", "three", "four", "five", "six"]
        sentences = [f"Item {word} was reviewed today" for word in words]
        result = ExtractiveSummarizer().leading_sentences(". ".join(sentences) + ".", 3)
        assert result == ". ".join(sentences[:3]) + "."

    def test_skips_short_fragments(self) -> None:
        text = "Ok. Fine. The first real sentence. The second real sentence."
        result = ExtractiveSummarizer().leading_sentences(text, 3)
        assert result == "The first real sentence. The second real sentence."

    def test_empty_when_no_sentence_is_long_enough(self) -> None:
        assert ExtractiveSummarizer().leading_sentences("Ok. Yes. No.", 3) == ""

    def test_empty_text(self) -> None:
        assert ExtractiveSummarizer().leading_sentences("", 3) == ""
