"""End-to-end tests for the palette_report CLI."""

import numpy as np
import pytest
from PIL import Image

from palette_report import ImageAnalysis, _analyse_image, _report_image, main
from png_palette.chunks import palette_from_chunks
from png_palette.core_types import Color
from png_palette.mode import ColorMode


def _save(path, arr):
    Image.fromarray(arr).save(path)
    return path


def _few_colours():
    arr = np.zeros((4, 4, 4), dtype=np.uint8)
    arr[..., 3] = 255
    arr[0, 0] = (200, 10, 10, 255)
    arr[1, 1] = (10, 200, 10, 0)
    return arr


def _many_colours():
    arr = np.zeros((20, 20, 3), dtype=np.uint8)
    arr[..., 0] = np.arange(400).reshape(20, 20) % 256
    arr[..., 1] = np.arange(400).reshape(20, 20) // 256
    arr[..., 2] = 77
    return arr


class TestSingleFile:
    def test_report(self, tmp_path, capsys):
        path = _save(tmp_path / "few.png", _few_colours())
        assert main([str(path)]) == 0
        out = capsys.readouterr().out
        assert "=== few.png ===" in out
        assert "Distinct colours: 3" in out
        assert "Best mode: indexed" in out

    def test_write_payloads(self, tmp_path, capsys):
        path = _save(tmp_path / "few.png", _few_colours())
        outdir = tmp_path / "out"
        assert main([str(path), "--write-payloads", "--outdir", str(outdir)]) == 0
        plte = (outdir / "few.plte").read_bytes()
        trns = (outdir / "few.trns").read_bytes()
        assert len(plte) == 9
        pal = palette_from_chunks(plte, trns)
        assert set(pal) == {
            Color(0, 0, 0),
            Color(10, 200, 10, 0),
            Color(200, 10, 10),
        }
        assert "Wrote few.plte" in capsys.readouterr().out

    def test_opaque_payload_has_no_trns(self, tmp_path):
        arr = _few_colours()
        arr[..., 3] = 255
        path = _save(tmp_path / "opaque.png", arr)
        assert main([str(path), "--write-payloads"]) == 0
        assert (tmp_path / "opaque.plte").exists()
        assert not (tmp_path / "opaque.trns").exists()

    def test_truecolor_skips_payloads(self, tmp_path, capsys):
        path = _save(tmp_path / "many.png", _many_colours())
        assert main([str(path), "--write-payloads"]) == 0
        out = capsys.readouterr().out
        assert "Best mode: truecolor" in out
        assert "[warn] payloads skipped" in out
        assert not (tmp_path / "many.plte").exists()

    def test_forced_mode(self, tmp_path, capsys):
        path = _save(tmp_path / "few.png", _few_colours())
        assert main([str(path), "--mode", "truecolor_alpha"]) == 0
        assert "Mode: truecolor_alpha (requested)" in capsys.readouterr().out

    def test_forced_mode_incompatible(self, tmp_path, capsys):
        path = _save(tmp_path / "many.png", _many_colours())
        assert main([str(path), "--mode", "indexed"]) == 1
        assert "[error] many.png" in capsys.readouterr().err

    def test_unreadable_image(self, tmp_path, capsys):
        path = tmp_path / "broken.png"
        path.write_bytes(b"not an image")
        assert main([str(path)]) == 1
        assert "[error] broken.png" in capsys.readouterr().err

    def test_missing_input(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.png")]) == 2
        assert "not found" in capsys.readouterr().err

    def test_debug(self, tmp_path, capsys):
        path = _save(tmp_path / "few.png", _few_colours())
        assert main([str(path), "--debug"]) == 0
        assert "[debug] Channels: 1" in capsys.readouterr().out


class TestFolder:
    @pytest.mark.parametrize("jobs", ["1", "3"])
    def test_folder_in_name_order(self, tmp_path, capsys, jobs):
        _save(tmp_path / "b.png", _many_colours())
        _save(tmp_path / "a.png", _few_colours())
        (tmp_path / "notes.txt").write_text("skip me")
        assert main([str(tmp_path), "--jobs", jobs]) == 0
        out = capsys.readouterr().out
        assert out.index("=== a.png ===") < out.index("=== b.png ===")
        assert "notes.txt" not in out

    def test_empty_folder(self, tmp_path, capsys):
        assert main([str(tmp_path)]) == 0
        assert "[warn] no images" in capsys.readouterr().out


class TestAnalysis:
    def test_keeps_summary_and_payloads_only(self, tmp_path):
        path = _save(tmp_path / "few.png", _few_colours())
        result = _analyse_image(path, "auto")
        assert result.failure is None
        assert not hasattr(result, "palette")
        assert (result.width, result.height) == (4, 4)
        assert result.distinct == 3
        assert result.indexable and not result.opaque and not result.grayscale
        assert result.chosen is ColorMode.INDEXED
        assert len(result.plte) == 9
        assert result.trns is not None
        pal = palette_from_chunks(result.plte, result.trns)
        assert Color(10, 200, 10, 0) in pal

    def test_no_payloads_for_truecolor(self, tmp_path):
        path = _save(tmp_path / "many.png", _many_colours())
        result = _analyse_image(path, "auto")
        assert result.chosen is ColorMode.TRUECOLOR
        assert result.plte is None and result.trns is None

    def test_report_without_mode_is_an_error(self, tmp_path, capsys):
        result = ImageAnalysis(path=tmp_path / "odd.png")
        assert _report_image(result, None, False, False) is False
        assert "[error] odd.png" in capsys.readouterr().err

    def test_indexed_without_payload_is_an_error(self, tmp_path, capsys):
        result = ImageAnalysis(
            path=tmp_path / "odd.png",
            best=ColorMode.INDEXED,
            chosen=ColorMode.INDEXED,
        )
        assert _report_image(result, None, True, False) is False
        assert "no PLTE payload" in capsys.readouterr().err
        assert not (tmp_path / "odd.plte").exists()
