"""Sample layout script: comments grouped per post, post title in the header.

  boxkit pdf examples/comments_report.py
"""

SETTINGS = {'pagesize': 'A4', 'margin': 36}

POSTS = [
    ('Layout with boxes', ['First!', 'Nice grid.', 'How do gutters work?']),
    ('Headers that follow content', ['Useful.', 'Works with page gaps too.']),
]


def build(report):
    doc = report.document
    layout = report.layout

    def header():
        title = report.values.lookup('post_title', doc.page_number)
        layout.box((0, doc.bounds.top), '100%', 24, lambda: report.text.titled_text('Post', title), track=False)

    def footer():
        doc.text_box(f"{doc.page_number} / {doc.page_count}", at=(0, 14), height=14, align='right')

    report.repeat(header)
    report.repeat(footer)

    for index, (title, comments) in enumerate(POSTS):
        if index:
            doc.start_new_page()
        report.values.store('post_title', title)
        previous = layout.box((0, doc.bounds.top - 30), '100%', 20, lambda: report.text.horizontal_line(0))
        for number, comment in enumerate(comments, start=1):
            author = layout.box_below(previous, '25%', 40, lambda n=number: doc.text_box(f"#{n}"), gutter=6, padding=4)
            layout.box_beside(author, '100%l', 40, lambda c=comment: doc.text_box(c), gutter=6, padding=4)
            previous = author
        layout.box_below(previous, '100%', '100%l', lambda: report.grid.define_grid_block(
            2, 1, lambda: (
                report.grid.text_grid_cell(0, 0, 'Comments', str(len(comments))),
                report.grid.text_grid_cell(0, 1, 'Post', title),
            ), padding=4, gutter=4,
        ), gutter=12)
