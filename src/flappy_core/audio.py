"""
audio.py: Synthesized sound effects played through pygame.mixer.
"""

import logging
import math
from array import array
from typing import Dict, List, Optional, Sequence, Tuple

import pygame

from .data_models import SoundEvent

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050
GAIN = 0.08
FADE_FLOOR = 0.001              # Amplitude reached at the end of every tone

Tone = Tuple[float, float, str]  # (frequency Hz, duration s, waveform)

TONES: Dict[SoundEvent, List[Tone]] = {
    SoundEvent.FLAP: [(400, 0.08, "sine"), (600, 0.06, "sine")],
    SoundEvent.SCORE: [(523, 0.1, "sine"), (659, 0.1, "sine"), (784, 0.15, "sine")],
    SoundEvent.HIT: [(150, 0.2, "sawtooth"), (100, 0.25, "sawtooth")],
}


def synth_tone(freq: float, duration: float, wave: str = "sine",
               sample_rate: int = SAMPLE_RATE, gain: float = GAIN) -> List[float]:
    """Samples in [-gain, gain], decaying exponentially down to FADE_FLOOR."""
    count = int(sample_rate * duration)
    samples = []
    for i in range(count):
        t = i / sample_rate
        phase = (freq * t) % 1.0
        if wave == "sawtooth":
            value = 2.0 * phase - 1.0
        else:
            value = math.sin(2.0 * math.pi * phase)
        amp = gain * (FADE_FLOOR / gain) ** (t / duration)
        samples.append(value * amp)
    return samples


def mix_tones(tones: Sequence[Tone], sample_rate: int = SAMPLE_RATE,
              channels: int = 1) -> array:
    """Sums tones that start together into one signed 16-bit buffer."""
    parts = [synth_tone(freq, dur, wave, sample_rate) for freq, dur, wave in tones]
    length = max((len(p) for p in parts), default=0)
    mixed = [0.0] * length
    for part in parts:
        for i, value in enumerate(part):
            mixed[i] += value

    pcm = array("h")
    for value in mixed:
        sample = int(max(-1.0, min(1.0, value)) * 32767)
        for _ in range(channels):
            pcm.append(sample)
    return pcm


class ToneAudio:
    """
    Plays one short synthesized effect per sound event.
    The mixer is opened on first use; if that fails the notifier goes quiet.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._sounds: Optional[Dict[SoundEvent, "pygame.mixer.Sound"]] = None
        self._unavailable = False

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        logger.info("Sound %s", "on" if self.enabled else "off")
        return self.enabled

    def play(self, event: SoundEvent):
        if not self.enabled or self._unavailable:
            return
        sounds = self._load()
        if sounds is None:
            return
        try:
            sounds[event].play()
        except pygame.error as e:
            logger.warning("Could not play %s sound: %s", event.value, e)

    def _load(self) -> Optional[Dict[SoundEvent, "pygame.mixer.Sound"]]:
        if self._sounds is not None:
            return self._sounds
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
            frequency, _, channels = pygame.mixer.get_init()
            self._sounds = {
                event: pygame.mixer.Sound(buffer=mix_tones(tones, frequency, channels).tobytes())
                for event, tones in TONES.items()
            }
        except pygame.error as e:
            logger.warning("Audio unavailable, sound disabled: %s", e)
            self._unavailable = True
            return None
        return self._sounds
