"""
The sample program the driver analyzes when no source file is given.
"""

SAMPLE_PROGRAM = """
programa
inteiro x, y;
escreva("Olá, mundo!");
leia(x);
if (x > 0) {
  y := x * 2;
  escreva("O dobro de ", x, " é ", y);
} else {
  escreva("O valor de x é negativo");
}
fimprog
"""

SAMPLE_FILENAME = "<sample>"
