"""Tests for the faq_crawler command-line entry point."""

from unittest.mock import patch

from openpyxl import load_workbook

from faq_crawler.__main__ import build_parser, main, print_progress
from faq_crawler.crawler import CrawlResult, FaqCrawler
from faq_crawler.models import HeadingRecord


def _result():
    record = HeadingRecord(
        title="Overview - intro - 语音通话",
        href="https://docs.agora.io/cn/Voice/product_voice?platform=Web#intro",
        language="cn",
        product="Audio Call",
        platform="Web",
    )
    return CrawlResult(
        links=["https://docs.agora.io/cn/Voice/product_voice?platform=Web"],
        records=[record],
        stats={"seeds": 2, "links": 1, "articles_without_headings": 0, "records": 1, "elapsed_time": 0.5},
    )


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.output is None
        assert args.output_json is None
        assert args.timeout is None
        assert args.headed is False

    def test_flags(self):
        args = build_parser().parse_args(["--output", "a.xlsx", "--timeout", "10", "--headed", "-v"])
        assert args.output == "a.xlsx"
        assert args.timeout == 10
        assert args.headed and args.verbose


class TestProgress:
    def test_next_url(self, capsys):
        print_progress(1, 3, "https://x.io/2")
        assert capsys.readouterr().out.strip() == "Progress: 1 / 3. Next: https://x.io/2"

    def test_done(self, capsys):
        print_progress(3, 3, None)
        assert capsys.readouterr().out.strip() == "Progress: 3 / 3. Done!"


class TestMain:
    def test_writes_outputs(self, tmp_path, capsys):
        xlsx = tmp_path / "faq.xlsx"
        json_path = tmp_path / "faq.json"
        with patch.object(FaqCrawler, "run", return_value=_result()):
            code = main(["--output", str(xlsx), "--output-json", str(json_path)])

        assert code == 0
        assert json_path.exists()
        ws = load_workbook(xlsx)["mySheet"]
        assert ws["A2"].value == "Overview - intro - 语音通话"
        out = capsys.readouterr().out
        assert "CRAWL COMPLETE" in out
        assert str(xlsx) in out

    def test_keyboard_interrupt(self, tmp_path, capsys):
        xlsx = tmp_path / "faq.xlsx"
        with patch.object(FaqCrawler, "run", side_effect=KeyboardInterrupt):
            code = main(["--output", str(xlsx)])

        assert code == 130
        assert not xlsx.exists()
        assert "cancelled" in capsys.readouterr().out
