import logging

import gradio as gr

from format_converter.formats import FORMATS, UPLOAD_EXTENSIONS, format_label
from format_converter.handlers import (
    handle_convert,
    handle_download,
    handle_file_upload,
    handle_input_format_change,
    input_placeholder,
    mark_converting,
    update_convert_button,
)
from format_converter.session import ConverterState, convert_button_label

FORMAT_CHOICES = [(format_label(fmt), fmt) for fmt in FORMATS]
DEFAULTS = ConverterState()

# --- UI Definition ---
with gr.Blocks(title="File Converter") as demo:
    gr.Markdown("# File Converter")
    gr.Markdown("Convert between JSON, CSV, and XML formats with validation and error handling.")

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### Input Data")
            with gr.Row():
                input_format = gr.Dropdown(
                    label="Input Format",
                    choices=FORMAT_CHOICES,
                    value=DEFAULTS.input_format,
                    interactive=True,
                )
                file_input = gr.File(label="Upload File", file_types=UPLOAD_EXTENSIONS)
            input_text = gr.Textbox(
                label="Input",
                placeholder=input_placeholder(DEFAULTS.input_format),
                lines=15,
                max_lines=30,
            )

        # Right Panel: Output
        with gr.Column(scale=1):
            gr.Markdown("### Output Data")
            with gr.Row():
                output_format = gr.Dropdown(
                    label="Output Format",
                    choices=FORMAT_CHOICES,
                    value=DEFAULTS.output_format,
                    interactive=True,
                )
                download_btn = gr.Button("Download")
            output_text = gr.Textbox(
                label="Output",
                placeholder="Converted data will appear here...",
                lines=15,
                max_lines=30,
                interactive=False,
            )
            download_output = gr.File(label="Download Result")

    convert_btn = gr.Button(
        convert_button_label(DEFAULTS.input_format, DEFAULTS.output_format),
        variant="primary",
        interactive=False,
    )
    notice = gr.Markdown()

    file_input.upload(
        fn=handle_file_upload,
        inputs=[file_input, input_text, input_format],
        outputs=[input_text, input_format, notice],
    )

    input_text.change(
        fn=update_convert_button,
        inputs=[input_text, input_format, output_format],
        outputs=[convert_btn],
    )

    input_format.change(
        fn=handle_input_format_change,
        inputs=[input_format, input_text, output_format],
        outputs=[input_text, convert_btn],
    )

    output_format.change(
        fn=update_convert_button,
        inputs=[input_text, input_format, output_format],
        outputs=[convert_btn],
    )

    convert_btn.click(
        fn=mark_converting,
        outputs=[convert_btn],
    ).then(
        fn=handle_convert,
        inputs=[input_text, output_text, input_format, output_format],
        outputs=[output_text, notice],
    ).then(
        fn=update_convert_button,
        inputs=[input_text, input_format, output_format],
        outputs=[convert_btn],
    )

    download_btn.click(
        fn=handle_download,
        inputs=[output_text, output_format],
        outputs=[download_output],
        concurrency_limit=1,
    )

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    demo.launch()
