"""
Unit tests for the lookup_barcode command line entry point.
"""

import json
from unittest.mock import AsyncMock, patch

import pytest

from foodscan.domain.dietary.models import AnalysisVerdict
from foodscan.domain.product.assembler import ResultAssembler
from foodscan.domain.product.models import NormalizedProduct
from foodscan.scripts import lookup_barcode


class TestLookupBarcodeScript:
    def test_parser_collects_diets(self) -> None:
        args = lookup_barcode.build_parser().parse_args(
            ["8886467124723", "--diet", "vegan", "--diet", "keto"]
        )

        assert args.barcode == "8886467124723"
        assert args.diet == ["vegan", "keto"]

    async def test_prints_record(self, capsys: pytest.CaptureFixture[str], tmp_path) -> None:
        record = ResultAssembler.assemble(
            NormalizedProduct(product_name="Oat Drink"), AnalysisVerdict.safe()
        )

        with patch.object(lookup_barcode, "lookup_product", new=AsyncMock(return_value=record)) as mock_lookup:
            code = await lookup_barcode.main(
                ["1234567890128", "--diet", "vegan", "--env-file", str(tmp_path / ".env")]
            )

        assert code == 0
        printed = json.loads(capsys.readouterr().out)
        assert printed["productName"] == "Oat Drink"
        assert printed["status"] == "YES"
        profile = mock_lookup.await_args.args[1]
        assert profile.follows("vegan")

    async def test_not_found_exit_code(self, capsys: pytest.CaptureFixture[str], tmp_path) -> None:
        with patch.object(lookup_barcode, "lookup_product", new=AsyncMock(return_value=None)):
            code = await lookup_barcode.main(["0000000000000", "--env-file", str(tmp_path / ".env")])

        assert code == 1
        assert "No product data available" in capsys.readouterr().out
