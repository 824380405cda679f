"""Unit tests for canonical delimited text conversions."""

import json

from portfolio.domain.delimited_text import (
    decode_images,
    encode_images,
    format_metrics,
    join_lines,
    parse_metrics,
    split_lines,
)
from portfolio.domain.entities import Metric


class TestLines:
    def test_split_drops_blank_lines_and_trims(self):
        assert split_lines("  Kubernetes Ops \n\n Terraform\r\n   \nSRE") == ["Kubernetes Ops", "Terraform", "SRE"]

    def test_split_empty_input(self):
        assert split_lines("") == []
        assert split_lines(None) == []

    def test_join_then_split_is_lossless(self):
        items = ["Self-documenting CI/CD", "K8s guardrails", "Observability"]
        assert split_lines(join_lines(items)) == items


class TestMetrics:
    def test_parse_value_and_label(self):
        metrics = parse_metrics("40+ | services on shared pipelines\n<20m|mean recovery target")
        assert metrics == [
            Metric(value="40+", label="services on shared pipelines"),
            Metric(value="<20m", label="mean recovery target"),
        ]

    def test_label_is_optional(self):
        assert parse_metrics("99.9%") == [Metric(value="99.9%", label="")]

    def test_format_for_storage_and_forms(self):
        metrics = [Metric("15", "K8s clusters"), Metric("3x", "")]
        assert format_metrics(metrics) == "15|K8s clusters\n3x"
        assert format_metrics(metrics, " | ") == "15 | K8s clusters\n3x"

    def test_format_drops_empty_metrics(self):
        assert format_metrics([Metric("", ""), Metric("1", "one")]) == "1|one"

    def test_format_then_parse_round_trips(self):
        metrics = [Metric("40+", "services"), Metric("15", "clusters")]
        assert parse_metrics(format_metrics(metrics, " | ")) == metrics


class TestImages:
    def test_encode_respects_limit(self):
        urls = [f"/uploads/{i}.png" for i in range(7)]
        assert json.loads(encode_images(urls, limit=5)) == urls[:5]

    def test_decode_json_array(self):
        assert decode_images('["/uploads/a.png", " ", "/uploads/b.png"]') == ["/uploads/a.png", "/uploads/b.png"]

    def test_decode_empty_falls_back_to_legacy_image(self):
        assert decode_images("", legacy_image="/uploads/legacy.png") == ["/uploads/legacy.png"]
        assert decode_images("[]", legacy_image="/uploads/legacy.png") == ["/uploads/legacy.png"]

    def test_decode_never_returns_none(self):
        assert decode_images(None) == []
        assert decode_images('{"not": "a list"}') == []

    def test_decode_unparseable_text_is_split(self):
        assert decode_images("/a.png, /b.png\n/c.png") == ["/a.png", "/b.png", "/c.png"]
