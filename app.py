"""
Flask Web Application for the Catalyst Screen Collator
Simple upload/process/download interface
"""

import os
from flask import Flask, render_template, request, send_from_directory, jsonify, url_for
from werkzeug.security import safe_join

from screen_collator.errors import ParseError, ArchiveGenerationError
from screen_collator.extractors.screen_extractor import ScreenExtractor
from screen_collator.generators.archive_generator import ArchiveGenerator
from screen_collator.generators.csv_generator import CSVGenerator

PREVIEW_LIMIT = 10

app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = 10 * 1024 * 1024  # 10MB max file size
app.config['OUTPUT_FOLDER'] = os.environ.get(
    'SCREEN_COLLATOR_OUTPUT', '/tmp/screen_collator_outputs'
)

@app.route('/')
def index():
    """Main page"""
    return render_template('index.html')

@app.route('/convert', methods=['POST'])
def convert():
    """Handle course XML upload and screen extraction"""
    if 'file' not in request.files:
        return jsonify({'error': 'No file uploaded'}), 400

    file = request.files['file']
    if file.filename == '':
        return jsonify({'error': 'No file selected'}), 400

    if not file.filename.lower().endswith('.xml'):
        return jsonify({'error': 'File must be .xml'}), 400

    try:
        screens = ScreenExtractor().extract(file.read())
    except ParseError as e:
        return jsonify({'error': str(e)}), 422

    output_dir = app.config['OUTPUT_FOLDER']
    os.makedirs(output_dir, exist_ok=True)

    try:
        csv_path = CSVGenerator().generate(screens, output_dir)
    except OSError as e:
        return jsonify({'error': f'Failed to write CSV file: {e}'}), 500

    # Archive failures leave the screen list and CSV usable
    zip_url = None
    archive_error = None
    try:
        zip_path = ArchiveGenerator().generate(screens, output_dir)
        zip_url = url_for('download', filename=zip_path.name)
    except ArchiveGenerationError as e:
        archive_error = str(e)

    return jsonify({
        'success': True,
        'catalog_id': screens.catalog_id,
        'total_screens': len(screens),
        'preview': screens.to_dicts()[:PREVIEW_LIMIT],
        'csv_url': url_for('download', filename=csv_path.name),
        'zip_url': zip_url,
        'archive_error': archive_error
    })

@app.route('/download/<filename>')
def download(filename):
    """Download a generated CSV or ZIP"""
    file_path = safe_join(app.config['OUTPUT_FOLDER'], filename)
    if file_path is None or not os.path.isfile(file_path):
        return jsonify({'error': 'File not found'}), 404

    return send_from_directory(
        app.config['OUTPUT_FOLDER'],
        filename,
        as_attachment=True,
        download_name=filename
    )

@app.route('/health')
def health():
    """Health check endpoint"""
    return jsonify({'status': 'healthy'})

if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    app.run(host='0.0.0.0', port=port, debug=False)
