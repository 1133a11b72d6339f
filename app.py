import logging

import gradio as gr

from json_node_editor.handlers import (
    TABLE_HEADERS,
    cancel_edit_handler,
    export_document_handler,
    load_document_handler,
    save_edit_handler,
    select_node_handler,
    start_edit_handler,
    view_mode_handler,
)

# --- UI Definition ---
with gr.Blocks(title="JSON Node Editor") as demo:
    gr.Markdown("# JSON Node Editor")
    gr.Markdown("Upload a JSON file, pick a node, and edit its fields in place.")

    # State
    document_state = gr.State()
    has_changes_state = gr.State(value=False)

    with gr.Row():
        # Left Panel: Document & Node selection
        with gr.Column(scale=1):
            gr.Markdown("### 1. Import")
            file_input = gr.File(label="Upload JSON File", file_types=[".json"])
            status_msg = gr.Textbox(label="Status", interactive=False)

            gr.Markdown("### 2. Select Node")
            node_selector = gr.Dropdown(
                label="Node (JSON Path)",
                choices=["$"],
                value="$",
                allow_custom_value=True,
                interactive=True,
            )
            strict_paths = gr.Checkbox(label="Fail when the node path no longer resolves", value=False)

            gr.Markdown("### 4. Export")
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="document")
            export_btn = gr.Button("Export Document", variant="primary")
            download_output = gr.File(label="Download Result")

        # Right Panel: Node content
        with gr.Column(scale=1):
            gr.Markdown("### 3. Content")
            content_view = gr.Code(label="Content", language="json", interactive=False)
            with gr.Row():
                edit_btn = gr.Button("Edit", size="sm")
                save_btn = gr.Button("Save", size="sm", variant="primary", visible=False)
                cancel_btn = gr.Button("Cancel", size="sm", visible=False)
            rows_table = gr.Dataframe(
                headers=TABLE_HEADERS,
                datatype=["str", "str", "str"],
                col_count=(3, "fixed"),
                interactive=False,
                label="Fields",
            )
            locator_view = gr.Code(label="JSON Path", language="json", interactive=False, value="$")

    edit_controls = [rows_table, edit_btn, save_btn, cancel_btn]

    file_input.upload(
        fn=load_document_handler,
        inputs=[file_input],
        outputs=[document_state, has_changes_state, node_selector, status_msg, content_view, locator_view, rows_table],
    ).then(fn=view_mode_handler, outputs=edit_controls)

    node_selector.change(
        fn=select_node_handler,
        inputs=[document_state, node_selector],
        outputs=[content_view, locator_view, rows_table, status_msg],
    ).then(fn=view_mode_handler, outputs=edit_controls)

    edit_btn.click(fn=start_edit_handler, outputs=edit_controls)

    cancel_btn.click(
        fn=cancel_edit_handler,
        inputs=[document_state, node_selector],
        outputs=[rows_table, edit_btn, save_btn, cancel_btn, status_msg],
    )

    save_btn.click(
        fn=save_edit_handler,
        inputs=[document_state, has_changes_state, node_selector, rows_table, strict_paths],
        outputs=[
            document_state,
            has_changes_state,
            content_view,
            locator_view,
            rows_table,
            node_selector,
            edit_btn,
            save_btn,
            cancel_btn,
            status_msg,
        ],
    )

    export_btn.click(
        fn=export_document_handler,
        inputs=[document_state, output_filename],
        outputs=[download_output, status_msg],
    )

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    demo.launch()
