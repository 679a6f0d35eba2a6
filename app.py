import streamlit as st
import time
import base64
import pandas as pd
import plotly.graph_objects as go

from codec import (
    calculate_entropy,
    compress,
    compress_framed,
    compression_stats,
    decompress,
    decompress_framed,
)
from lzw import LZW_decoding, LZW_encoding, code_width

DICT_SIZES = [512, 1024, 2048, 4096]
FORMATS = ["Headerless", "Framed (length prefix)"]

# Page config
st.set_page_config(
    page_title="LZW Compression Analyzer",
    layout="wide"
)

# Title
st.title("LZW Compression Analyzer")
st.markdown("---")

# Initialize session state
for key in ['input_data', 'input_bytes', 'file_name']:
    if key not in st.session_state:
        st.session_state[key] = None
if 'original_size' not in st.session_state:
    st.session_state.original_size = 0

# Sidebar for controls
with st.sidebar:
    st.header("Settings")

    input_type = st.radio(
        "Input Type:",
        ["Upload File", "Enter Text"]
    )

    mode = st.radio(
        "Mode:",
        ["Single Run", "Compare Dictionary Sizes"]
    )

    dict_size = st.selectbox("Dictionary size:", DICT_SIZES, index=0)
    artifact_format = st.selectbox("Artifact format:", FORMATS)
    st.caption(f"Code width: {code_width(dict_size)} bits")


def run_codec(text, dict_size, framed):
    """Compress and decompress `text`; returns (compressed, decompressed_text)"""
    if framed:
        compressed = compress_framed(text, dict_size)
        return compressed, decompress_framed(compressed, dict_size)

    compressed = compress(text, dict_size)
    return compressed, decompress(compressed, dict_size)


def dictionary_trace(input_bytes, dict_size):
    """Codes plus dictionary size after every insertion"""
    history = []
    codes = LZW_encoding(input_bytes, dict_size, history=history)
    resets = sum(1 for size in history if size == 256)
    return codes, history, resets


# Main area
st.header("Input Data")
if input_type == "Upload File":
    uploaded_file = st.file_uploader(
        "Upload a text file:",
        type=['txt', 'csv', 'json', 'xml', 'py', 'html', 'cpp', 'java', 'md']
    )

    if uploaded_file:
        file_bytes = uploaded_file.read()
        try:
            text_data = file_bytes.decode('utf-8')
        except UnicodeDecodeError:
            st.error("The file is not valid UTF-8 text")
            st.stop()

        st.session_state.input_data = text_data
        st.session_state.input_bytes = file_bytes
        st.session_state.original_size = len(file_bytes)
        st.session_state.file_name = uploaded_file.name

        col1, col2, col3, col4 = st.columns(4)
        with col1:
            st.metric("File Name", uploaded_file.name)
        with col2:
            st.metric("File Size", f"{len(file_bytes):,} bytes")
        with col3:
            st.metric("Characters", f"{len(text_data):,}")
        with col4:
            st.metric("Entropy", f"{calculate_entropy(file_bytes):.3f} bits/byte")

        with st.expander("File Preview (First 500 characters)"):
            st.text(text_data[:500])

else:  # Enter Text
    input_text = st.text_area(
        "Enter text to compress:",
        height=200,
        value="the lz78 compression algorithm compresses text to be in a compressed form "
              "so the compressed text can take up less space than the uncompressed text"
    )

    if input_text:
        file_bytes = input_text.encode('utf-8')

        st.session_state.input_data = input_text
        st.session_state.input_bytes = file_bytes
        st.session_state.original_size = len(file_bytes)
        st.session_state.file_name = "text_input.txt"

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Characters", f"{len(input_text):,}")
        with col2:
            st.metric("Size", f"{len(file_bytes):,} bytes")
        with col3:
            st.metric("Entropy", f"{calculate_entropy(file_bytes):.3f} bits/byte")
    else:
        st.info("Enter some text to compress")
        st.session_state.input_data = None
        st.session_state.input_bytes = None
        st.session_state.original_size = 0

if st.session_state.input_data and st.session_state.input_bytes:
    input_data = st.session_state.input_data
    input_bytes = st.session_state.input_bytes
    original_size = st.session_state.original_size
    framed = artifact_format != FORMATS[0]

    st.markdown("---")

    if mode == "Single Run":
        st.header(f"LZW ({dict_size} entries, {artifact_format.lower()})")

        with st.expander(" Algorithm Information"):
            st.markdown(f"""
            **How this LZW variant works:**
            - Dictionary starts with the 256 single bytes
            - Each new phrase gets the next index, starting at 256
            - When the dictionary reaches {dict_size} entries it is reset to the 256 bytes
            - Every code is written with a fixed width of {code_width(dict_size)} bits

            **Headerless format:** trailing bits that do not fill a byte are dropped,
            so the end of the text may be lost.
            **Framed format:** a 4-byte code count makes the artifact lossless.
            """)

        if st.button("Run LZW", type="primary"):
            try:
                start_time = time.time()
                compressed, decompressed_text = run_codec(input_data, dict_size, framed)
                compression_time = time.time() - start_time

                codes, history, resets = dictionary_trace(input_bytes, dict_size)
                stats = compression_stats(original_size, len(compressed))

                st.subheader("Compression Results")

                col1, col2, col3, col4 = st.columns(4)
                with col1:
                    st.metric("Original Size", f"{original_size:,} B")
                with col2:
                    st.metric("Compressed Size", f"{stats['compressed_size']:,} B")
                with col3:
                    st.metric("Space Saved", f"{stats['space_saved']:.1f}%")
                with col4:
                    st.metric("Time", f"{compression_time:.3f} s")

                col5, col6, col7, col8 = st.columns(4)
                with col5:
                    st.metric("Compression Ratio", f"{stats['ratio']:.2f}:1")
                with col6:
                    st.metric("Codes", f"{len(codes):,}")
                with col7:
                    st.metric("Code Width", f"{code_width(dict_size)} bits")
                with col8:
                    st.metric("Dictionary Resets", resets)

                st.subheader("Visualization")

                fig1 = go.Figure(data=[
                    go.Bar(name='Original', x=['Size'], y=[original_size], marker_color='blue'),
                    go.Bar(name='Compressed', x=['Size'], y=[stats['compressed_size']], marker_color='green')
                ])
                fig1.update_layout(
                    title="Size Comparison",
                    yaxis_title="Size (bytes)",
                    height=300
                )
                st.plotly_chart(fig1, use_container_width=True)

                savings = max(stats['space_saved'], 0)
                fig2 = go.Figure(data=[
                    go.Indicator(
                        mode="gauge+number",
                        value=savings,
                        title="Space Saved",
                        domain={'x': [0, 1], 'y': [0, 1]},
                        gauge={
                            'axis': {'range': [0, 100]},
                            'bar': {'color': "green" if savings > 50 else "orange" if savings > 20 else "red"},
                            'steps': [
                                {'range': [0, 20], 'color': "lightcoral"},
                                {'range': [20, 50], 'color': "lightyellow"},
                                {'range': [50, 100], 'color': "lightgreen"}]
                        }
                    )
                ])
                fig2.update_layout(height=300)
                st.plotly_chart(fig2, use_container_width=True)

                if history:
                    fig3 = go.Figure(data=[
                        go.Scatter(y=history, mode='lines', name='Dictionary size', line=dict(color='purple'))
                    ])
                    fig3.update_layout(
                        title="Dictionary Size per Inserted Phrase",
                        xaxis_title="Insertion",
                        yaxis_title="Entries",
                        height=300
                    )
                    st.plotly_chart(fig3, use_container_width=True)

                st.subheader(" Decompression Test")
                if decompressed_text == input_data:
                    st.success("**Decompression Successful!** Original and decompressed text match exactly.")
                elif framed:
                    st.error(f"**Decompression Failed!** Original: {len(input_data)} characters, "
                             f"Decompressed: {len(decompressed_text)} characters")
                else:
                    lost = len(input_data) - len(decompressed_text)
                    st.warning(f"Headerless artifact dropped its trailing bits: "
                               f"{len(decompressed_text)} of {len(input_data)} characters recovered "
                               f"({lost} lost). Use the framed format for a lossless round trip.")

                st.subheader("Download")
                b64 = base64.b64encode(compressed).decode()
                filename = f"compressed_lzw_{dict_size}_{st.session_state.file_name}.bin"
                download_link = f'<a href="data:application/octet-stream;base64,{b64}" download="{filename}">📥 Download Compressed File</a>'
                st.markdown(download_link, unsafe_allow_html=True)

                with st.expander("🔍 LZW Details"):
                    st.write(f"**First 10 codes:** {[int(code) for code in codes[:10]]}")

                    _, phrase_dict = LZW_decoding(codes, dict_size)

                    table_data = []
                    for code, phrase in list(phrase_dict.items())[256:266]:
                        table_data.append({
                            "Code": code,
                            "Phrase": repr(phrase.decode('utf-8', errors='replace'))[1:-1][:30]
                        })

                    if table_data:
                        st.write("**Dictionary entries (sample):**")
                        st.table(pd.DataFrame(table_data))
                    else:
                        st.write("No phrases were learned.")

            except Exception as e:
                st.error(f"Error during compression: {str(e)}")
                import traceback
                with st.expander("Error Details"):
                    st.code(traceback.format_exc())

    else:
        # Compare dictionary sizes
        st.header("Dictionary Size Comparison")

        if st.button("Compare Dictionary Sizes", type="primary"):
            results = []

            progress_bar = st.progress(0)
            status_text = st.empty()

            for idx, size in enumerate(DICT_SIZES):
                status_text.text(f"Testing {size} entries...")
                progress_bar.progress((idx + 1) / len(DICT_SIZES))

                try:
                    start_time = time.time()
                    compressed, decompressed_text = run_codec(input_data, size, framed)
                    comp_time = time.time() - start_time
                    _, _, resets = dictionary_trace(input_bytes, size)
                    stats = compression_stats(original_size, len(compressed))

                    results.append({
                        "Dictionary Size": size,
                        "Code Width": code_width(size),
                        "Time (s)": round(comp_time, 3),
                        "Size (bytes)": stats['compressed_size'],
                        "Ratio": round(stats['ratio'], 2),
                        "Resets": resets,
                        "Round Trip": decompressed_text == input_data
                    })

                except Exception as e:
                    st.warning(f"{size} entries failed: {str(e)}")

            progress_bar.empty()
            status_text.text("Comparison complete!")

            if results:
                df = pd.DataFrame(results)

                st.subheader("Comparison Results")
                st.dataframe(df, use_container_width=True)

                fig1 = go.Figure(data=[
                    go.Bar(
                        x=df["Dictionary Size"].astype(str),
                        y=df["Size (bytes)"],
                        text=df["Size (bytes)"],
                        textposition='auto',
                        marker_color=['blue', 'green', 'orange', 'red']
                    )
                ])
                fig1.update_layout(
                    title="Compressed Size by Dictionary Size (lower is better)",
                    xaxis_title="Dictionary Size",
                    yaxis_title="Size (bytes)",
                    height=400
                )
                st.plotly_chart(fig1, use_container_width=True)

                best_size = df.loc[df["Size (bytes)"].idxmin()]
                st.info(f"**Best Size:** {best_size['Dictionary Size']} entries, "
                        f"{best_size['Size (bytes)']:,} bytes")
else:
    st.info(" Please upload a file or enter text to begin compression")

st.markdown("---")
with st.expander(" About the Compressed Format"):
    st.markdown("""
    | Format | Header | Trailing bits | Round trip |
    |--------|--------|---------------|------------|
    | **Headerless** | none | dropped | may lose the last code |
    | **Framed** | 4-byte code count | zero padded | always exact |

    **Key Metrics:**
    - **Compression Ratio:** Original size / Compressed size (higher is better)
    - **Space Saved:** Percentage reduction in size
    - **Entropy:** Theoretical minimum bits per byte
    - **Dictionary Resets:** How often the dictionary filled up and started over
    """)
