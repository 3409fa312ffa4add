PLACEHOLDERS = ("nome", "exame")


def render_message(template_str: str, context: dict) -> str:
    """
    Substitui os placeholders `{nome}` e `{exame}` pelos valores do context.

    Substituição literal e sensível a maiúsculas; todas as ocorrências são
    trocadas. Outros tokens entre chaves são mantidos como estão.

    Exemplo:
        template = "Olá {nome}, é hora do seu exame de {exame}"
        ctx = {"nome": "Maria", "exame": "Cardiologia"}
        output = render_message(template, ctx)
    """
    rendered = template_str
    for key in PLACEHOLDERS:
        if key in context:
            rendered = rendered.replace("{" + key + "}", str(context[key]))
    return rendered
