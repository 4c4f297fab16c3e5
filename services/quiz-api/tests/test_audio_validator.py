"""
Audio validator tests.

Covers the accepted encoding (16-bit PCM at 16000 Hz), each rejection rule,
and the raw-PCM fallback for files without a WAV container.
"""

import pytest

from domain import AudioValidator
from tests.helpers import build_wav_bytes, write_wav


@pytest.fixture
def validator():
    return AudioValidator()


class TestAcceptedAudio:
    def test_accepts_16khz_16bit_pcm(self, validator, valid_wav):
        assert validator.validate(valid_wav) is True

    def test_accepts_path_given_as_string(self, validator, valid_wav):
        assert validator.validate(str(valid_wav)) is True

    def test_channel_count_is_not_checked(self, validator, tmp_path):
        path = write_wav(tmp_path / "stereo.wav", channels=2)
        assert validator.validate(path) is True

    def test_accepts_big_endian_rifx_container(self, validator, tmp_path):
        path = tmp_path / "answer.wav"
        path.write_bytes(build_wav_bytes(container=b"RIFX"))
        assert validator.validate(path) is True

    def test_arbitrary_bytes_fall_back_to_raw_pcm(self, validator, tmp_path):
        """Files with no WAV header are accepted as raw PCM."""
        path = tmp_path / "raw.pcm"
        path.write_bytes(bytes(range(256)) * 4)
        assert validator.validate(path) is True

    def test_riff_without_fmt_chunk_falls_back_to_raw_pcm(self, validator, tmp_path):
        path = tmp_path / "no_fmt.wav"
        path.write_bytes(b"RIFF\x04\x00\x00\x00WAVE")
        assert validator.validate(path) is True


class TestRejectedAudio:
    def test_rejects_empty_file(self, validator, tmp_path):
        path = tmp_path / "empty.wav"
        path.write_bytes(b"")
        assert validator.validate(path) is False

    @pytest.mark.parametrize("sample_rate", [8000, 22050, 44100, 48000])
    def test_rejects_other_sample_rates(self, validator, tmp_path, sample_rate):
        path = write_wav(tmp_path / "rate.wav", sample_rate=sample_rate)
        assert validator.validate(path) is False

    def test_rejects_rifx_container_at_other_sample_rate(self, validator, tmp_path):
        path = tmp_path / "answer.wav"
        path.write_bytes(build_wav_bytes(sample_rate=44100, container=b"RIFX"))
        assert validator.validate(path) is False

    def test_rejects_rf64_container_with_8bit_samples(self, validator, tmp_path):
        path = tmp_path / "answer.wav"
        path.write_bytes(build_wav_bytes(bits_per_sample=8, container=b"RF64"))
        assert validator.validate(path) is False

    def test_rejects_8bit_samples(self, validator, tmp_path):
        path = write_wav(tmp_path / "8bit.wav", sample_width=1)
        assert validator.validate(path) is False

    def test_rejects_non_pcm_format_tag(self, validator, tmp_path):
        path = tmp_path / "alaw.wav"
        path.write_bytes(build_wav_bytes(audio_format=6, bits_per_sample=16))
        assert validator.validate(path) is False

    def test_rejects_missing_file(self, validator, tmp_path):
        assert validator.validate(tmp_path / "missing.wav") is False
