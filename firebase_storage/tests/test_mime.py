from firebase_storage.storage.mime import ExtensionMimeTypeDetector


def test_detect_from_path():
    detector = ExtensionMimeTypeDetector()
    assert detector.detect_mime_type_from_path("test/test-file.txt") == "text/plain"
    assert detector.detect_mime_type_from_path("a/B.PDF") == "application/pdf"
    assert detector.detect_mime_type_from_path("data.json") == "application/json"
    assert detector.detect_mime_type_from_path("README") is None


def test_detect_from_buffer():
    detector = ExtensionMimeTypeDetector()
    assert detector.detect_mime_type_from_buffer(b"%PDF-1.7 ...") == "application/pdf"
    assert detector.detect_mime_type_from_buffer(b"\x89PNG\r\n\x1a\n....") == "image/png"
    assert detector.detect_mime_type_from_buffer(b"plain words") == "text/plain"
    assert detector.detect_mime_type_from_buffer(b"\xff\xfe\x00\x81") == "application/octet-stream"
    assert detector.detect_mime_type_from_buffer(b"") is None


def test_detect_prefers_path_then_contents():
    detector = ExtensionMimeTypeDetector()
    assert detector.detect_mime_type("report.pdf", b"not a pdf") == "application/pdf"
    assert detector.detect_mime_type("report", b"%PDF-1.4") == "application/pdf"


def test_detect_from_buffer_cut_mid_character():
    detector = ExtensionMimeTypeDetector()
    truncated = ("a" + "é" * 300).encode("utf-8")[:512]
    assert detector.detect_mime_type_from_buffer(truncated) == "text/plain"
    assert detector.detect_mime_type_from_buffer(b"abc\xff" + truncated) == "application/octet-stream"
