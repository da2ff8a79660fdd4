import unittest

from tiel.syntax.parser import Parser
from tiel.syntax.printer import AstPrinter
from tiel.syntax.scanner import Scanner


def render(source):
    return AstPrinter().print(Parser(Scanner(source).scan_tokens()).parse())


class AstPrinterTestCase(unittest.TestCase):

    def test_statements(self):
        cases = {
            "var x = 1;": "(VarDeclStmt x (LiteralExpr 1.0))\n",
            "x = \"hi\";": "(ExpressionStmt (AssignExpr x (LiteralExpr hi)))\n",
            "print(nil, true);": "(ExpressionStmt (CallExpr (VariableExpr print) (LiteralExpr nil) "
                                 "(LiteralExpr true)))\n",
            "f();": "(ExpressionStmt (CallExpr (VariableExpr f)))\n",
            "{ }": "(BlockStmt)\n",
            "{ a; b; }": "(BlockStmt (ExpressionStmt (VariableExpr a)) (ExpressionStmt (VariableExpr b)))\n",
            "if a then b;": "(IfStmt (VariableExpr a) (ExpressionStmt (VariableExpr b)))\n",
            "if a then b; else c;": "(IfStmt (VariableExpr a) (ExpressionStmt (VariableExpr b)) "
                                    "(ExpressionStmt (VariableExpr c)))\n",
            "while not a do a = -1;": "(WhileStmt (UnaryExpr not (VariableExpr a)) "
                                      "(ExpressionStmt (AssignExpr a (UnaryExpr - (LiteralExpr 1.0)))))\n",
            "return;": "(ReturnStmt)\n",
            "return a or false;": "(ReturnStmt (LogicalExpr or (VariableExpr a) (LiteralExpr false)))\n",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, render(case), case)

    def test_function_declaration(self):
        expected = ("(FunctionDeclStmt add (Params a b) "
                    "(Body (ReturnStmt (BinaryExpr + (VariableExpr a) (VariableExpr b)))))\n")
        self.assertEqual(expected, render("fun add(a, b) { return a + b; }"))
        self.assertEqual("(FunctionDeclStmt f (Params) (Body))\n", render("fun f() {}"))

    def test_one_statement_per_line(self):
        self.assertEqual("(ExpressionStmt (VariableExpr a))\n(ExpressionStmt (VariableExpr b))\n", render("a; b;"))
        self.assertEqual("", render(""))


if __name__ == '__main__':
    unittest.main()
