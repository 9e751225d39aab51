import pytest

from conftest import make_chunk
from pngmsg.PNG import Png
from pngmsg.main import build_parser, main


class TestCli:
    def test_encode_decode(self, image_file, capsys):
        assert main(['encode', str(image_file), 'ruSt', 'hello']) == 0
        assert "Chunk ruSt added and saved to" in capsys.readouterr().out

        assert main(['decode', str(image_file), 'ruSt']) == 0
        assert "Message: hello" in capsys.readouterr().out

    def test_decode_not_found(self, image_file, capsys):
        assert main(['decode', str(image_file), 'XYZa']) == 1
        assert "Failed to find chunk with type 'XYZa'" in capsys.readouterr().err

    def test_remove(self, image_file, image_bytes, capsys):
        main(['encode', str(image_file), 'ruSt', 'hello'])
        assert main(['remove', str(image_file), 'ruSt']) == 0
        assert "removed" in capsys.readouterr().out
        assert image_file.read_bytes() == image_bytes

    def test_remove_to_output(self, image_file, tmp_path):
        out = tmp_path / 'clean.png'
        main(['encode', str(image_file), 'ruSt', 'hello'])
        assert main(['remove', str(image_file), 'ruSt', '-o', str(out)]) == 0
        assert main(['decode', str(out), 'ruSt']) == 1

    def test_bad_chunk_type(self, image_file, image_bytes, capsys):
        assert main(['encode', str(image_file), 'Ru1t', 'hello']) == 1
        assert "bad chunk type" in capsys.readouterr().err
        assert image_file.read_bytes() == image_bytes

    def test_decode_binary_payload(self, image_file, capsys):
        png = Png.parse(image_file.read_bytes())
        png.append_chunk(make_chunk("biNa", b"\xff\xfe"))
        image_file.write_bytes(png.serialize())
        assert main(['decode', str(image_file), 'biNa']) == 1
        err = capsys.readouterr().err
        assert "not UTF-8 text" in err
        assert "corrupted" not in err

    def test_corrupted_file(self, image_file, image_bytes, capsys):
        corrupted = bytearray(image_bytes)
        corrupted[20] ^= 0xFF
        image_file.write_bytes(bytes(corrupted))
        assert main(['print', str(image_file)]) == 1
        assert "may be corrupted" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main(['decode', str(tmp_path / 'nope.png'), 'ruSt']) == 1
        assert "Failed to access file" in capsys.readouterr().err

    def test_print(self, image_file, capsys):
        assert main(['print', str(image_file)]) == 0
        out = capsys.readouterr().out
        assert out.startswith("IHDR length: 13")
        assert "IEND length: 0" in out

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])
