"""
EMG Filtering Pipeline - Flask Backend

REST API exposing the filtering and feature-extraction pipeline:
- Processing a posted signal
- Generating and processing a simulated signal for a gesture
- CSV upload and processing
- Gesture catalogue
- Stage timing metrics and status

All endpoints return JSON responses. Invalid input answers 400.
"""
import os
import sys
import threading
from flask import Flask, request, jsonify

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import (
    FLASK_HOST, FLASK_PORT, FLASK_DEBUG, MAX_UPLOAD_SIZE_MB,
    SAMPLE_RATE, HUM_FREQUENCY, NOTCH_BANDWIDTH,
    DEFAULT_WINDOW_SIZE, DEFAULT_NUM_SAMPLES
)
from src.emg_sources import CSVSource, SimulatedSource
from src.gestures import Gesture, get_gesture_catalogue
from src.monitoring import get_stage_timer
from src.signal_processing import EMGPipeline, PipelineError
from src.signal_processing.pipeline import to_serializable

# Initialize Flask app
app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = MAX_UPLOAD_SIZE_MB * 1024 * 1024

# Global state
stage_timer = get_stage_timer()

# The shared stage timer tracks one run at a time
_timer_lock = threading.Lock()


def _run(pipeline: EMGPipeline, signal) -> dict:
    with _timer_lock:
        return pipeline.process(signal)


def _build_pipeline(params: dict) -> EMGPipeline:
    """Build a pipeline from request parameters, falling back to config."""
    return EMGPipeline(
        sample_rate=params.get('sample_rate', SAMPLE_RATE),
        hum_frequency=params.get('hum_frequency', HUM_FREQUENCY),
        bandwidth=params.get('bandwidth', NOTCH_BANDWIDTH),
        window_size=params.get('window_size', DEFAULT_WINDOW_SIZE),
        stage_timer=stage_timer
    )


# =============================================================================
# ROUTES - GESTURES
# =============================================================================

@app.route('/api/gestures', methods=['GET'])
def list_gestures():
    """Get the gesture catalogue."""
    return jsonify({'gestures': get_gesture_catalogue()})


# =============================================================================
# ROUTES - PROCESSING
# =============================================================================

@app.route('/api/process', methods=['POST'])
def process_signal():
    """
    Filter a raw signal and extract its features.

    Expected JSON: {"signal": [x0, x1, ...], "window_size": 3,
                    "sample_rate": 10, "hum_frequency": 60, "bandwidth": 2}
    Only "signal" is required.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or 'signal' not in data:
        return jsonify({'error': 'signal required'}), 400

    try:
        pipeline = _build_pipeline(data)
        result = _run(pipeline, data['signal'])
    except PipelineError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        return jsonify({'error': str(e)}), 500

    response = to_serializable(result)
    response['params'] = pipeline.get_params()
    return jsonify(response)


@app.route('/api/generate', methods=['POST'])
def generate_signal():
    """
    Generate a simulated signal for a gesture and process it.

    Expected JSON: {"gesture": 1-8, "num_samples": 100, "window_size": 3,
                    "seed": 42}
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or 'gesture' not in data:
        return jsonify({'error': 'gesture required'}), 400

    try:
        gesture = Gesture.from_number(data['gesture'])
        pipeline = _build_pipeline(data)
        source = SimulatedSource(seed=data.get('seed'))
        signal = source.get_signal(data.get('num_samples', DEFAULT_NUM_SAMPLES), gesture)
        result = _run(pipeline, signal)
    except PipelineError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        return jsonify({'error': str(e)}), 500

    response = to_serializable(result)
    response['gesture'] = {'number': gesture.value, 'display_name': gesture.display_name}
    response['params'] = pipeline.get_params()
    return jsonify(response)


@app.route('/api/upload', methods=['POST'])
def upload_csv():
    """
    Upload a CSV recording and process one of its columns.

    Form fields: file (CSV), optional column, window_size.
    """
    if 'file' not in request.files:
        return jsonify({'error': 'No file provided'}), 400

    file = request.files['file']
    if file.filename == '':
        return jsonify({'error': 'No file selected'}), 400

    if not file.filename.endswith('.csv'):
        return jsonify({'error': 'File must be a CSV'}), 400

    try:
        column = request.form.get('column', 0, type=int)
        window_size = request.form.get('window_size', DEFAULT_WINDOW_SIZE, type=int)

        csv_source = CSVSource(column=column)
        if not csv_source.load_from_file(file.read()):
            return jsonify({'error': 'Failed to parse CSV file'}), 400

        pipeline = _build_pipeline({'window_size': window_size})
        result = _run(pipeline, csv_source.get_signal())
    except PipelineError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        return jsonify({'error': str(e)}), 500

    response = to_serializable(result)
    response['sample_count'] = csv_source.available_samples()
    response['params'] = pipeline.get_params()
    return jsonify(response)


# =============================================================================
# ROUTES - METRICS AND STATUS
# =============================================================================

@app.route('/api/metrics', methods=['GET'])
def get_metrics():
    """Get per-stage timing statistics."""
    return jsonify({
        'breakdown': stage_timer.get_breakdown_stats(),
        'latest': stage_timer.get_latest(),
        'run_count': stage_timer.run_count
    })


@app.route('/api/status', methods=['GET'])
def get_status():
    """Get overall system status and default parameters."""
    return jsonify({
        'status': 'ok',
        'defaults': {
            'sample_rate': SAMPLE_RATE,
            'hum_frequency': HUM_FREQUENCY,
            'bandwidth': NOTCH_BANDWIDTH,
            'window_size': DEFAULT_WINDOW_SIZE,
            'num_samples': DEFAULT_NUM_SAMPLES
        },
        'runs_processed': stage_timer.run_count
    })


# =============================================================================
# MAIN
# =============================================================================

if __name__ == '__main__':
    print("\n" + "="*60)
    print("EMG FILTERING PIPELINE - SERVER")
    print("="*60 + "\n")
    print(f"[*] Starting server at http://{FLASK_HOST}:{FLASK_PORT}")
    app.run(
        host=FLASK_HOST,
        port=FLASK_PORT,
        debug=FLASK_DEBUG,
        threaded=True
    )
