"""Tests for spoken feedback (with a fake speech engine)."""

import voice.feedback
from config.settings import AppConfig
from voice.feedback import VoiceFeedback


class FakeEngine:
    def __init__(self):
        self.properties = {}
        self.spoken = []

    def setProperty(self, name, value):
        self.properties[name] = value

    def say(self, text):
        self.spoken.append(text)

    def runAndWait(self):
        pass


class RecordingThread:
    """Stands in for threading.Thread: records starts, never runs the target."""

    started = []

    def __init__(self, target, daemon):
        self.target = target

    def start(self):
        RecordingThread.started.append(self.target)


def make_voice(enabled=True):
    config = AppConfig()
    config.voice_enabled = enabled
    engine = FakeEngine()
    voice = VoiceFeedback(config, engine=engine)
    # Evita el hilo: la cola se vacía a mano
    voice.is_speaking = True
    return voice, engine


def flush(voice):
    voice._process_queue()


def test_engine_is_configured():
    voice, engine = make_voice()
    assert engine.properties == {"volume": 0.8, "rate": 150}


def test_keys_are_spoken():
    voice, engine = make_voice()
    for key in ["7", "+", "C", "/"]:
        voice.speak_key(key)
    flush(voice)
    assert engine.spoken == ["7", "plus", "clear", "divided by"]
    assert voice.is_speaking is False


def test_results_are_spoken():
    voice, engine = make_voice()
    voice.speak_result("5.0")
    voice.speak_result("2.5")
    voice.speak_result("NaN")
    voice.speak_result("Error")
    flush(voice)
    voice.speak_result("1.0E7")
    flush(voice)
    assert engine.spoken == [
        "equals 5", "equals 2 point 5", "equals not a number", "error",
        "equals 1 point 0 times ten to the 7",
    ]


def test_disabled_voice_is_silent():
    voice, engine = make_voice(enabled=False)
    voice.speak("hello")
    flush(voice)
    assert engine.spoken == []


def test_queue_keeps_latest_five():
    voice, engine = make_voice()
    for i in range(8):
        voice.speak(str(i))
    flush(voice)
    assert engine.spoken == ["3", "4", "5", "6", "7"]


def test_only_one_worker_is_started(monkeypatch):
    RecordingThread.started = []
    monkeypatch.setattr(voice.feedback.threading, "Thread", RecordingThread)
    voice_fb, engine = make_voice()
    voice_fb.is_speaking = False

    voice_fb.speak("one")
    voice_fb.speak("two")
    assert len(RecordingThread.started) == 1
    assert voice_fb.is_speaking is True

    # El worker vacía la cola y libera el flag
    RecordingThread.started[0]()
    assert engine.spoken == ["one", "two"]
    assert voice_fb.is_speaking is False

    voice_fb.speak("three")
    assert len(RecordingThread.started) == 2


def test_toggle():
    voice, engine = make_voice(enabled=False)
    assert voice.toggle() is True
    assert voice.config.voice_enabled is True
    assert voice.toggle() is False
