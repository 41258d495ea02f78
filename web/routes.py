"""
Flask routes of the web interface
"""
import logging
from io import BytesIO

from flask import render_template, send_file, jsonify

from core.exceptions import PDFGenerationError, PreviewError, ValidationError
from core.format_catalog import FormatCatalog
from core.input_parser import parse_orientation
from core.preview import build_preview
from core.settings_store import SettingsStore
from services.layout_service import LayoutService
from services.pdf_service import LayoutPDFExporter
from services.preview_service import PreviewRenderer, preview_details
from utils.helpers import sanitize_filename
from web.utils import form_values, request_data, to_data_uri

logger = logging.getLogger(__name__)


def configure_routes(app, catalog: FormatCatalog, settings: SettingsStore):
    """Register the Flask routes; stores are passed in, not read from globals"""
    layout_service = LayoutService(catalog)

    @app.route('/')
    def index():
        """Main page: form plus result table"""
        data = request_data()
        response = layout_service.calculate(data)
        return render_template(
            'index.html',
            form=form_values(data),
            rows=response['rows'],
            error=response['error'],
            theme=settings.theme,
            gripper_sides=app.config['SHEET_CALC'].gripper_sides,
        ), 200 if response['success'] else 400

    @app.route('/calculate', methods=['POST'])
    def calculate():
        response = layout_service.calculate(request_data())
        return jsonify(response), 200 if response['success'] else 400

    @app.route('/formats', methods=['GET'])
    def list_formats():
        return jsonify({
            'formats': [
                dict(fmt.to_dict(), index=i, custom=fmt.custom)
                for i, fmt in enumerate(catalog.formats)
            ]
        })

    @app.route('/formats', methods=['POST'])
    def add_format():
        data = request_data()
        try:
            sheet = catalog.add_custom_format(data.get('width'), data.get('height'))
        except ValidationError as e:
            return jsonify({'error': str(e)}), 400
        return jsonify({'format': sheet.to_dict(), 'index': len(catalog) - 1}), 201

    @app.route('/preview', methods=['POST'])
    def preview():
        """Preview of one format/orientation as embedded SVG or PNG"""
        data = request_data()
        image_format = data.get('image_format', 'svg')
        if image_format not in ('svg', 'png'):
            return jsonify({'error': f"Unsupported image format: {image_format}"}), 400

        try:
            calculation, result = _selected_result(layout_service, data)
            geometry = build_preview(
                result,
                calculation.product,
                calculation.margins,
                app.config['SHEET_CALC'].preview_width,
                app.config['SHEET_CALC'].preview_height,
                app.config['SHEET_CALC'].preview_padding,
            )
        except (ValidationError, PreviewError) as e:
            return jsonify({'error': str(e)}), 400

        renderer = PreviewRenderer(dark_mode=settings.dark_mode)
        payload = renderer.render(geometry, image_format)
        details = preview_details(geometry)
        details['image'] = to_data_uri(payload, image_format)
        return jsonify(details), 200

    @app.route('/export', methods=['POST'])
    def export_pdf():
        """Layout sheet PDF for download"""
        data = request_data()
        try:
            calculation, result = _selected_result(layout_service, data)
            buffer = BytesIO()
            LayoutPDFExporter().export(result, calculation.product, calculation.margins, buffer)
        except (ValidationError, PreviewError) as e:
            return jsonify({'error': str(e)}), 400
        except PDFGenerationError as e:
            return jsonify({'error': str(e)}), 500

        buffer.seek(0)
        filename = f"{sanitize_filename(result.sheet_format.name)}_{result.orientation.value}.pdf"
        logger.info(f"Layout PDF download: {filename}")
        return send_file(buffer, mimetype='application/pdf', as_attachment=True,
                         download_name=filename)

    @app.route('/theme', methods=['POST'])
    def toggle_theme():
        return jsonify({'theme': settings.toggle_theme()})


def _selected_result(layout_service: LayoutService, data: dict):
    try:
        format_index = int(data.get('format_index', -1))
    except (TypeError, ValueError):
        raise ValidationError(f"Unbekanntes Format: {data.get('format_index')}")
    orientation = parse_orientation(data.get('orientation'))
    return layout_service.result_for(data, format_index, orientation)
