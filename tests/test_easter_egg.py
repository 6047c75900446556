from PyQt5.QtCore import Qt

from timelinepaint.easter_egg import KONAMI_SEQUENCE, KonamiCode, paint_cool_face

from .helpers import blank_image, render_to_image


def test_full_sequence_triggers_once():
    k = KonamiCode()
    results = [k.feed(key) for key in KONAMI_SEQUENCE]
    assert results[-1] is True
    assert not any(results[:-1])
    # window was reset after the match
    assert k.feed(KONAMI_SEQUENCE[-1]) is False


def test_sequence_after_noise_still_triggers():
    k = KonamiCode()
    for key in (Qt.Key_X, Qt.Key_Up, Qt.Key_Space):
        k.feed(key)
    assert [k.feed(key) for key in KONAMI_SEQUENCE][-1] is True


def test_broken_sequence_does_not_trigger():
    k = KonamiCode()
    keys = list(KONAMI_SEQUENCE)
    keys[4] = Qt.Key_Right
    assert not any(k.feed(key) for key in keys)


def test_face_on_empty_area_is_noop():
    img = render_to_image(lambda p: paint_cool_face(p, 0, 100))
    assert img == blank_image()
