"""Tests for the command-line interface."""

import json
import sys

import pytest

from reviewdigest import cli


def run_cli(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["reviewdigest", *argv])
    cli.main()


class TestCli:
    """Tests for cli.main()."""
    
    def test_summarize_to_stdout(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "reviews.json"
        path.write_text(json.dumps([
            {"rating": 5, "comment": "Chất lượng tốt, giao hàng nhanh.", "createdAt": "2024-01-02T00:00:00Z"},
            {"rating": 4, "comment": "Đóng gói cẩn thận, giá hợp lý.", "createdAt": "2024-01-03T00:00:00Z"},
        ], ensure_ascii=False), encoding="utf-8")
        
        run_cli(monkeypatch, "summarize", str(path), "--no-ai")
        
        data = json.loads(capsys.readouterr().out)
        assert data["totalReviews"] == 2
        assert data["averageRating"] == "4.5"
        assert data["timeTrends"][0]["month"] == "2024-01"
        assert "metadata" not in data
    
    def test_summarize_to_file(self, tmp_path, monkeypatch):
        path = tmp_path / "reviews.json"
        path.write_text("[]", encoding="utf-8")
        out = tmp_path / "out.json"
        
        run_cli(monkeypatch, "summarize", str(path), "--no-ai", "--out", str(out))
        
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["summary"] == "Chưa có đánh giá nào cho sản phẩm này."
        assert data["metadata"]["version"]
    
    def test_missing_file_exits_non_zero(self, tmp_path, monkeypatch):
        with pytest.raises(SystemExit) as exc_info:
            run_cli(monkeypatch, "summarize", str(tmp_path / "missing.json"))
        assert exc_info.value.code == 1
    
    def test_export_rewrites_summary(self, tmp_path, monkeypatch, capsys):
        source = tmp_path / "summary.json"
        source.write_text(json.dumps(
            {"summary": "Sản phẩm có 1 đánh giá.", "totalReviews": 1, "metadata": {"version": "1.0.0"}},
            ensure_ascii=False,
        ), encoding="utf-8")
        out = tmp_path / "copy.json"
        
        run_cli(monkeypatch, "export", "--in", str(source), "--out", str(out), "--pretty")
        
        printed = capsys.readouterr().out
        assert '"totalReviews": 1' in printed
        assert f"Exported to {out}" in printed
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["summary"] == "Sản phẩm có 1 đánh giá."
        assert data["metadata"]["export_timestamp"]
    
    def test_export_missing_file_exits_non_zero(self, tmp_path, monkeypatch):
        with pytest.raises(SystemExit) as exc_info:
            run_cli(monkeypatch, "export", "--in", str(tmp_path / "missing.json"))
        assert exc_info.value.code == 1
