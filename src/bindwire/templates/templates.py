from textwrap import dedent

MODULE_TEMPLATE = dedent(
    """
    {{ module_docstring_block }}

    {{ imports_block }}


    {{ class_block }}


    __all__ = ["{{ class_name }}"]
    """,
).strip()

IMPORTS_TEMPLATE = dedent(
    """
    from __future__ import annotations
    {% if typing_names %}

    from typing import {{ typing_names | join(", ") }}
    {% endif %}

    {% for module, alias in imports %}
    import {{ module }} as {{ alias }}
    {% endfor %}
    """,
).strip()

CLASS_TEMPLATE = dedent(
    '''
    class {{ class_name }}:
        """{{ class_docstring }}"""

    {{ methods_block }}
    ''',
).strip()

DISPATCH_METHOD_TEMPLATE = dedent(
    '''
    {% for overload in overloads %}
    @overload
    @staticmethod
    def {{ method_name }}(
        view_owner: {{ overload.owner_annotation }},
        container: {{ container_annotation }},
    ) -> {{ overload.binding_annotation }}: ...

    {% endfor %}
    @staticmethod
    def {{ method_name }}(
        view_owner: {{ owner_annotation }},
        container: {{ container_annotation }},
    ) -> {{ return_annotation }}:
        """{{ docstring }}"""
    {{ body_block }}
    ''',
).strip()
