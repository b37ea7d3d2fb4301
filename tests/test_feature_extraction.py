"""
Tests for RMS/MAV feature extraction.
"""
import math

import numpy as np
import pytest

from src.signal_processing import feature_extraction
from src.signal_processing.feature_extraction import FeatureExtractor, extract_features
from src.signal_processing.validation import EmptySignalError


class TestExtractFeatures:

    @pytest.mark.parametrize('value', [-4.0, 0.25, 9.0, 1.0])
    def test_constant_signal(self, value):
        rms, mav = extract_features(np.full(10, value))
        assert rms == pytest.approx(math.sqrt(abs(value)))
        assert mav == pytest.approx(abs(value))

    @pytest.mark.parametrize('length', [1, 2, 37])
    def test_all_zero_signal(self, length):
        np.testing.assert_array_equal(extract_features(np.zeros(length)), [0.0, 0.0])

    def test_mixed_signs(self):
        rms, mav = extract_features([1.0, -1.0, 4.0, -4.0])
        assert mav == pytest.approx(2.5)
        assert rms == pytest.approx(math.sqrt(2.5))

    def test_vector_order_is_rms_then_mav(self):
        features = extract_features([-9.0])
        np.testing.assert_allclose(features, [3.0, 9.0])

    def test_textbook_rms(self, monkeypatch):
        monkeypatch.setattr(feature_extraction, 'RMS_USES_ABSOLUTE_MEAN', False)
        rms, mav = extract_features([3.0, -3.0, 3.0, -3.0])
        assert rms == pytest.approx(3.0)
        assert mav == pytest.approx(3.0)

    def test_empty_signal_raises(self):
        with pytest.raises(EmptySignalError):
            extract_features([])

    def test_empty_signal_is_a_division_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            extract_features(np.array([]))


class TestFeatureExtractor:

    def test_feature_names(self):
        assert FeatureExtractor().feature_names == ['rms', 'mav']

    def test_to_dict(self):
        extractor = FeatureExtractor()
        labelled = extractor.to_dict(extractor.extract([4.0, -4.0]))
        assert labelled == {'rms': pytest.approx(2.0), 'mav': pytest.approx(4.0)}
        assert all(isinstance(v, float) for v in labelled.values())

    def test_extract_batch(self):
        extractor = FeatureExtractor()
        matrix = extractor.extract_batch([[1.0, 1.0], [0.0, 0.0, 0.0], [-16.0]])
        assert matrix.shape == (3, 2)
        np.testing.assert_allclose(matrix[2], [4.0, 16.0])

    def test_extract_batch_empty(self):
        assert FeatureExtractor().extract_batch([]).shape == (0, 2)

    def test_extract_batch_rejects_empty_member(self):
        with pytest.raises(EmptySignalError):
            FeatureExtractor().extract_batch([[1.0], []])
