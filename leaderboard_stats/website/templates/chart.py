"""
Template pieces for the average-time line chart.
"""


def get_css() -> str:
    """Return the page stylesheet."""
    return """        body { font: 16px sans-serif; margin: 20px; }
        .grid line { stroke: #000; stroke-opacity: 0.1; }
        .grid path { stroke-width: 0; }
        .legend text { font-size: 16px; }
        button { margin-top: 12px; }"""


def get_javascript(json_data: str) -> str:
    """
    Return the chart script.

    Args:
        json_data: JSON object with 'years' and 'rows' ({day, values}) keys

    Returns:
        JavaScript code as a string
    """
    js_template = """        const DATA = {JSON_DATA_PLACEHOLDER};
        const years = DATA.years;
        const rows = DATA.rows;

        const margin = { top: 20, right: 80, bottom: 50, left: 80 };
        const width = 1600 - margin.left - margin.right;
        const height = 800 - margin.top - margin.bottom;

        const svg = d3.select("#chart")
            .append("svg")
            .attr("width", width + margin.left + margin.right)
            .attr("height", height + margin.top + margin.bottom)
            .attr("style", "max-width: 100%; height: auto;")
            .append("g")
            .attr("transform", `translate(${margin.left},${margin.top})`);

        const xScale = d3.scaleLinear()
            .domain(d3.extent(rows, d => d.day))
            .range([0, width]);

        const yScale = d3.scaleLinear()
            .domain([0, d3.max(rows, d => d3.max(d.values))])
            .nice()
            .range([height, 0]);

        const colorScale = d3.scaleOrdinal(d3.schemeCategory10).domain(years);

        svg.append("g")
            .attr("class", "grid")
            .attr("transform", `translate(0,${height})`)
            .call(d3.axisBottom(xScale).tickSize(-height).tickFormat(""));

        svg.append("g")
            .attr("class", "grid")
            .call(d3.axisLeft(yScale).tickSize(-width).tickFormat(""));

        svg.append("g")
            .attr("transform", `translate(0,${height})`)
            .call(d3.axisBottom(xScale).ticks(rows.length).tickFormat(d => `Day ${d}`));

        svg.append("g").call(d3.axisLeft(yScale));

        svg.append("text")
            .attr("x", -height / 2)
            .attr("y", -margin.left + 30)
            .attr("text-anchor", "middle")
            .attr("transform", "rotate(-90)")
            .text("Average seconds of top finishers");

        years.forEach((year, yearIndex) => {
            const points = rows.map(d => [d.day, d.values[yearIndex]]);
            const line = d3.line()
                .x(p => xScale(p[0]))
                .y(p => yScale(p[1]));

            svg.append("path")
                .datum(points)
                .attr("fill", "none")
                .attr("stroke", colorScale(year))
                .attr("stroke-width", 2)
                .attr("d", line);

            svg.selectAll(`.dot-${year}`)
                .data(points)
                .enter()
                .append("circle")
                .attr("class", `dot-${year}`)
                .attr("cx", p => xScale(p[0]))
                .attr("cy", p => yScale(p[1]))
                .attr("r", 4)
                .attr("fill", colorScale(year));

            svg.append("text")
                .attr("class", "legend")
                .attr("x", 50)
                .attr("y", 20 + yearIndex * 20)
                .attr("fill", colorScale(year))
                .text(year);
        });

        d3.select("#download").on("click", () => {
            const node = d3.select("#chart svg").node();
            const svgString = new XMLSerializer().serializeToString(node);
            const canvas = document.createElement("canvas");
            canvas.width = width + margin.left + margin.right;
            canvas.height = height + margin.top + margin.bottom;
            const img = new Image();
            img.onload = () => {
                canvas.getContext("2d").drawImage(img, 0, 0);
                const a = document.createElement("a");
                a.download = "chart.png";
                a.href = canvas.toDataURL("image/png");
                a.click();
            };
            img.src = "data:image/svg+xml;base64," + btoa(svgString);
        });"""

    return js_template.replace('{JSON_DATA_PLACEHOLDER}', json_data)


def get_page(css: str, js: str, d3_url: str, generated_time: str) -> str:
    """Assemble the complete HTML document."""
    return f'''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>Leaderboard Average Times</title>
    <script src="{d3_url}"></script>
    <style>
{css}
    </style>
</head>
<body>
    <div id="chart"></div>
    <button id="download">Download Chart as Image</button>
    <p>Generated {generated_time}</p>

    <script>
{js}
    </script>
</body>
</html>'''
