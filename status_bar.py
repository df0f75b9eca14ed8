import os
import time


def render_status(context, width):
    """
    context keys: status_msg, status_until, mode, slot, file_path, index,
                   last_index, size
    """
    text = ""
    now = time.time()
    if context.get('status_msg') and now < context.get('status_until', 0):
        text = f" {context['status_msg']}"
    else:
        mode = context.get('mode', 'NORMAL')
        slot = context.get('slot', 'HEX')
        fname = context.get('file_path') or ''
        if fname:
            fname = os.path.basename(fname)
        index = context.get('index', 0)
        last_index = context.get('last_index', 0)
        size = context.get('size', 0)
        pos_info = f"0x{index:08x} ({index}/{last_index})"
        text = f" {mode} | {fname} | {pos_info} | {slot} | {size} bytes"

    return text.ljust(width)[:width]
