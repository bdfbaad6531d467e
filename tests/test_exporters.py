"""
Tests for result export.
"""

import csv
import json

import pytest

from pixelprint.models import HashAlgorithm, HashResult
from pixelprint.utils.exporters import export_results


@pytest.fixture
def results():
    return [
        HashResult(
            path="/photos/a.png",
            algorithm=HashAlgorithm.AVERAGE,
            precision=2,
            hash_value="1010",
        ),
        HashResult(
            path="/photos/b.png",
            algorithm=HashAlgorithm.AVERAGE,
            precision=2,
            error="Cannot decode image: bad header",
        ),
    ]


class TestExportResults:
    """Test export_results in each format."""

    def test_txt(self, results, temp_dir):
        output = temp_dir / "report.txt"
        export_results(results, output, 'txt')
        content = output.read_text(encoding='utf-8')
        assert content.startswith("IMAGE HASH REPORT")
        assert "a  ahash/2  /photos/a.png" in content
        assert "FAILED" in content
        assert "/photos/b.png: Cannot decode image: bad header" in content

    def test_csv(self, results, temp_dir):
        output = temp_dir / "report.csv"
        export_results(results, output, 'csv')
        with open(output, newline='', encoding='utf-8') as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 2
        assert rows[0]['hash'] == "1010"
        assert rows[0]['hex'] == "a"
        assert rows[0]['bits'] == "4"
        assert rows[1]['hash'] == ""
        assert rows[1]['error'] == "Cannot decode image: bad header"

    def test_json(self, results, temp_dir):
        output = temp_dir / "report.json"
        export_results(results, output, 'json')
        data = json.loads(output.read_text(encoding='utf-8'))
        assert [HashResult.from_dict(item) for item in data] == results

    def test_unknown_format(self, results, temp_dir):
        with pytest.raises(ValueError):
            export_results(results, temp_dir / "report.xml", 'xml')
