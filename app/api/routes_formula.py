from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse
from app.core import ParseRejected, depth, parse, render, simplify, simplify_fully, size, translate
from app.utils import get_logger

router = APIRouter()
logger = get_logger('Formula API')


def _error(status_code, message):
    return JSONResponse(status_code=status_code, content={
        "status": "error",
        "message": message
    })

def _run(data, action, rewrite=None):
    formula_str = data.get("formula", None)   # '(p & T) <-> ~q' - required
    if not formula_str:
        return _error(400, "Missing 'formula' field.")
    if not isinstance(formula_str, str):
        return _error(400, "'formula' must be a string.")

    try:
        tree = parse(formula_str)
        source = render(tree)
        if rewrite is not None:
            tree = rewrite(tree)
        logger.info(f"{action}: {formula_str} -> {render(tree)}")
        return {
            "status": "success",
            "action": action,
            "formula": formula_str,
            "input": source,
            "tree": render(tree),
            "depth": depth(tree),
            "size": size(tree),
        }

    except ParseRejected as e:
        logger.info(f"Rejected '{formula_str}': {e}")
        return _error(422, str(e))
    except Exception as e:
        logger.exception(f"Error while running {action}")
        return _error(500, str(e))


@router.post("/parse")
def parse_formula(data: dict = Body(...)):
    return _run(data, "parse")

@router.post("/simplify")
def simplify_formula(data: dict = Body(...)):
    full = data.get("full", False)   # repeat until stable
    if not isinstance(full, bool):
        return _error(400, "'full' must be a boolean.")
    return _run(data, "simplify", simplify_fully if full else simplify)

@router.post("/translate")
def translate_formula(data: dict = Body(...)):
    then_simplify = data.get("simplify", False)
    if not isinstance(then_simplify, bool):
        return _error(400, "'simplify' must be a boolean.")

    def rewrite(tree):
        tree = translate(tree)
        if then_simplify:
            tree = simplify_fully(tree)
        return tree

    return _run(data, "translate", rewrite)
